#!/usr/bin/env python3
"""
WAVEBREAK Launcher
===================
Run this script to start the game.
"""

from wavebreak.main import main

if __name__ == "__main__":
    main()
