from nestforge.cli import main

main()
