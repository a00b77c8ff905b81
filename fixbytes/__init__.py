"""
fixbytes
~~~~~~~~~~~~~~~~~~~~~~~~~~
Human friendly byte sizes: "4MiB" instead of 4194304.
:copyright: © 2022 Some Engineering Inc.
:license: Apache 2.0, see LICENSE for more details.
"""

__title__ = "fixbytes"
__description__ = "Parse and format human readable byte sizes."
__author__ = "Some Engineering Inc."
__license__ = "Apache 2.0"
__copyright__ = "Copyright © 2022 Some Engineering Inc."
__version__ = "2.3.0a0"