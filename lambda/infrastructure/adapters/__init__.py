"""Adapters de entrada (HTTP) e saída (providers)"""
