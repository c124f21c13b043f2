# Copyright © 2018-2021 InAccel
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from pathlib import Path
from loguru import logger
import sys

def setup_logging(level = "INFO", logFile = None, rotation = "1 day"):
	"""Send loguru output to stderr and, if logFile is set, to a rotating file."""
	logger.remove()

	logger.add(sys.stderr, format = "{time:HH:mm:ss} | {level: <7} | {message}", level = level)

	if (logFile):
		logFile = Path(logFile)
		logFile.parent.mkdir(parents = True, exist_ok = True)
		logger.add(logFile, format = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{line} - {message}", level = level, rotation = rotation)
