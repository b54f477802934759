"""Reusable UI components"""
