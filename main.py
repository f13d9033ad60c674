#!/usr/bin/env python3
"""
Dice guess - roll dice and guess their total value
"""

from diceguess.cli.__main__ import main


if __name__ == '__main__':
    main()
