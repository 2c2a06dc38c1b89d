from flashquiz.cli.main import main

main()
