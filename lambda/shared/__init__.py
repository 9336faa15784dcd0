"""Shared layer: configuração e utilitários"""
