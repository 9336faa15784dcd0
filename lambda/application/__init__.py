"""Application Layer - Casos de uso, portas e DTOs"""
