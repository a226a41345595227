from bundlelens.cli import main

main()
