"""
The CONTROLLER layer turns user input and timer ticks into Session
transitions and pushes the results to the views through sink protocols.
"""
