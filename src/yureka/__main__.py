from yureka.cli import main

main()
