from src.handlers.send_record.handler import main

main()
