"""
courseview – load a JSON course catalog, filter it, sort it, browse it.
"""
