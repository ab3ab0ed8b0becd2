# todo_api/__main__.py
from .app import main

main()
