"""Output adapters"""
