#!/usr/bin/env python3
from krypton import main

if __name__ == "__main__":
    main()
