"""
Batch orchestration: context, pipeline, statistics and exceptions.
"""
