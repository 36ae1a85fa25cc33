import logging


# pytest tweaks logging such that our debug logs go to stderr, which is spammy
# under --capture=no. Turn default logging back down explicitly.
logging.basicConfig(level=logging.INFO)
