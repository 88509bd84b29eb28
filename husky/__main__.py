from husky.cli.main import main

main()
