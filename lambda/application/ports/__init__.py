"""Application Ports"""
