"""
Review Tool - AI Code Review Assistant

A Python tool that sends source code to the Claude API for review and
splits the free-form reply into commentary, a recommended fix and the
offending snippet.
"""

__version__ = "0.1.0"
