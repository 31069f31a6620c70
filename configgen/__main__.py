from configgen.cli import main

main()
