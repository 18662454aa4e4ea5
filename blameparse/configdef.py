"""blameparse default configuration file

Every configuration element ever used in the program must exist here.
These defaults may be overridden in the user's config file.
"""

from blameparse.blamedef import COMMIT_HASH_LENGTH


# Length of the commit hashes starting each header line
# Repositories using SHA-256 object names need 64 here
commit_hash_length = COMMIT_HASH_LENGTH

# Character map used when reading blame output from a file
blame_encoding = 'UTF-8'

# Number of hash characters to show in summaries
summary_short_hash_length = 8
