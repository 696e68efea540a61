from stableheap.main import main

main()
