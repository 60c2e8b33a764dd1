#!/usr/bin/env python3
"""Main entry point for the customer service package."""

from service_order.scripts.run_service import main

if __name__ == '__main__':
    main()
