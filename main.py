#!/usr/bin/env python3
"""
Six Cities - Offer Data Import Tool

A CLI tool that parses tab-separated rental offer files and prints the decoded records,
preparing data for the Six Cities REST API server.
"""

from six_cities.cli import cli

if __name__ == '__main__':
    cli()
