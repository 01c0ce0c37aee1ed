from amplitude.app import main

main()
