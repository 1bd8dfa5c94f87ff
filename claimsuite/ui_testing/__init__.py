"""
UI testing for the claims portal: framework, page objects, test data and scenarios.
"""
