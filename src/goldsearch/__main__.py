from goldsearch.cli import main

main()
