"""Command line interface for the AE expression linter and formatter"""
