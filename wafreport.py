#!/usr/bin/env python3
"""
ModSecurity Anomaly Score Report
================================
Thin entry-point. All logic lives in src.scoring.

Usage:
  grep -E -o "[0-9-]+ [0-9-]+$" waf.log | python3 wafreport.py
  python3 wafreport.py scores.txt -o scores.json
"""

import sys

from src.scoring.cli import main

if __name__ == "__main__":
    sys.exit(main())
