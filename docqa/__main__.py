from docqa.main import main

main()
