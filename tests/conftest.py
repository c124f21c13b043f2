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

import pytest
from loguru import logger

from DataParser import TrainingRow, bucket_id

@pytest.fixture(autouse=True)
def disable_logger():
	logger.remove()
	logger.add(lambda msg: None)
	yield

class ListParser:
	"""In-memory DataParser: bucket number -> rows. Records every identifier asked for."""

	def __init__(self, prefix, buckets):
		self.prefix = prefix
		self.buckets = buckets
		self.calls = []

	def parse_file(self, identifier):
		self.calls.append(identifier)

		for number, rows in self.buckets.items():
			if (bucket_id(self.prefix, number) == identifier):
				return list(rows)

		return []

PETS = [
	TrainingRow("cat", ("red",), (5.0,)),
	TrainingRow("cat", ("red",), (7.0,)),
	TrainingRow("dog", ("blue",), (1.0,)),
	TrainingRow("dog", ("blue",), (2.0,)),
]

@pytest.fixture
def make_parser():
	return ListParser

@pytest.fixture
def pets_parser():
	# training rows spread over two buckets, bucket 9 held out
	return ListParser("pets", {
		0: PETS[:2],
		3: PETS[2:],
		9: [TrainingRow("cat", ("red",), (6.0,)), TrainingRow("dog", ("green",), (1.5,))],
	})
