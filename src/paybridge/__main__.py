# src/paybridge/__main__.py
from paybridge.app import main

main()
