#!/usr/bin/env python3
"""
Drawgame - Main Entry Point
Draw with your fingers; turn the device face-down and shake it to erase.
"""

import logging

from drawgame.core.app import DrawApp

def main():
    """Main entry point for the drawing game."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = DrawApp()

    try:
        app.run()
    except KeyboardInterrupt:
        print("\n👋 Stopping...")

if __name__ == "__main__":
    main()
