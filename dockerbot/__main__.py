from dockerbot.launcher import main

main()
