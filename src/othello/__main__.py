from othello.main import main

main()
