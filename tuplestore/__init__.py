"""
tuplestore: schema descriptors for a tuple-oriented storage engine.
"""
