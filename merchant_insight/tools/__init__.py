"""Aggregation, transaction entry and LLM insight tools"""
