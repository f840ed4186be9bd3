# mtstream/constants.py
"""Fixed values shared by the stream decoders."""

# Every record is preceded by a u32 type tag and a u16 revision. Declared
# "size including tag" fields count these six bytes too.
TAG_SIZE = 4
REVISION_SIZE = 2
TAG_AND_REVISION_SIZE = TAG_SIZE + REVISION_SIZE

# Tag of the first record of every stream, used for byte order detection
STREAM_HEADER_TAG = 0x3e9

# Placeholder records carry at least marker + size after the tag
PLACEHOLDER_MIN_SIZE = TAG_AND_REVISION_SIZE + 8

# Project label map constant stored after its marker
LABEL_MAP_CONSTANT = 0x16

# Asset catalog name total is biased by the catalog header size
ASSET_CATALOG_NAME_SIZE_BIAS = 22

# Label trees deeper than this are rejected; JSON conversion of an accepted
# tree must stay within the interpreter recursion limit
MAX_LABEL_TREE_DEPTH = 64

# Opaque regions are skipped in pieces of this size
SKIP_CHUNK_SIZE = 64 * 1024
