# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import sys

from ._cli import main

sys.exit(main())
