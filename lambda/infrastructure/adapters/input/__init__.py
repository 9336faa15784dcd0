"""Input adapters"""
