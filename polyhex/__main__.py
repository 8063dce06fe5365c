from polyhex.cli import main

main()
