#!/usr/bin/env python3
"""
Constants shared by the tcdinspect decode pipeline.

Copyright (C) 2025 tcdinspect contributors
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

# Every libtcd database starts with this header line
TCD_SIGNATURE = b"[VERSION] = PFM Software - libtcd"

# External decoder (tcd-utils) and the environment variable overriding it
DEFAULT_DECODER = "restore_tide_db"
DECODER_ENV_VAR = "TCDINSPECT_DECODER"

# Work area layout
WORKAREA_PREFIX = "tcdinspect-"
STAGED_BASE_NAME = "foo"
STAGED_EXTENSION = ".tcd"
PRIMARY_OUTPUT_EXTENSION = ".txt"
SECONDARY_OUTPUT_EXTENSION = ".xml"

# The decoder writes its text output in ISO 8859-1
PRIMARY_OUTPUT_ENCODING = "latin-1"
# Latin-1 maps every byte to one character, so diagnostics survive unchanged
DIAGNOSTICS_ENCODING = "latin-1"
# XML documents without a declaration or BOM are UTF-8
XML_DEFAULT_ENCODING = "utf-8"

SIGNATURE_READ_SIZE = len(TCD_SIGNATURE)
