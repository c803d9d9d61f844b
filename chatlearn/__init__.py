"""
chatlearn: a chat service that learns a first-order Markov chain from the
messages it sees and answers with seeded continuations.
"""

__version__ = "1.0.0"
