from chessrules.app import main

main()
