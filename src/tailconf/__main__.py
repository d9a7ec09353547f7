from tailconf.cli import main

main()
