from .UI import main

main()
