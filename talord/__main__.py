from talord.cli import main

main()
