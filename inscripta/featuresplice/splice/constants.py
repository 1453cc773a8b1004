"""
Constants used when splicing features.
"""

# appended to the display id of the host sequence record to name a spliced product
SPLICED_ID_SUFFIX = "_spliced_feat"
