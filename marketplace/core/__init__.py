"""
Core Module

Application assembly and domain building blocks shared by every bounded context.
"""
