"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas de providers e adapters HTTP
"""
