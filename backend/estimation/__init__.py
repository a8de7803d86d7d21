"""
Tatami estimation engine.

Pure Python math over fixed lookup tables. No I/O, no state between calls.
Given an AnswerSet, produce a priced range plus the accuracy the wizard shows.
"""
