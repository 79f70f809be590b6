# Separator used when a multi-valued artist field is flattened into one
# native string (and split back on read).
SEP_ARTIST = ";"

# ID3v2 revision written unless configured otherwise. Some older players only
# read 2.3.
DEFAULT_ID3V2_VERSION = 4
SUPPORTED_ID3V2_VERSIONS = [3, 4]

# Xiph comment holding base64 encoded FLAC picture blocks
XIPH_PICTURE_KEY = "METADATA_BLOCK_PICTURE"

# APEv2 cover items, stored as b"<description>\x00<image data>"
APE_COVER_FRONT_KEY = "Cover Art (Front)"
APE_COVER_BACK_KEY = "Cover Art (Back)"

# Orphan totals (a total with no number to attach it to)
ID3_TOTAL_TRACKS_DESC = "TOTALTRACKS"
ID3_TOTAL_DISCS_DESC = "TOTALDISCS"
APE_TOTAL_TRACKS_KEY = "TotalTracks"
APE_TOTAL_DISCS_KEY = "TotalDiscs"

# Largest value accepted for track/disc numbers and totals
MAX_NUMBER = 0xFFFF

ENCODING = "utf-8"
