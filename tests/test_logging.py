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

from loguru import logger

from Logging import setup_logging
from NaiveBayes import NB

def test_training_is_logged_to_file(tmp_path, pets_parser):
	logFile = tmp_path / "logs" / "bayes.log"
	setup_logging("DEBUG", logFile)

	NB("pets", 9, pets_parser)
	logger.remove()

	text = logFile.read_text()
	assert "-- Reading bucket pets-0: 2 rows" in text
	assert "-- Training took:" in text
