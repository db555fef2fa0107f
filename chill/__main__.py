from chill.main import main

main()
