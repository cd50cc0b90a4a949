from impacted.cli.app import main

main()
