"""Page modules"""
