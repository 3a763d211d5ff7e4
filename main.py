#!/usr/bin/env python3
"""
cf-notice - Main Entry Point

This is the main entry point for the DNS change notifier.
It can be run directly or imported as a module.
"""

from cf_notice.cli.main import main

if __name__ == "__main__":
    main()
