"""Query session and identifier helpers"""
