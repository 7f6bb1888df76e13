"""Six Cities - rental offer data import tool"""
