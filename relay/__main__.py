from relay.launcher import main

main()
