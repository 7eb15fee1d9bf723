from markd.cli.main import main

main()
