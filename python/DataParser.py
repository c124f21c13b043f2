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

import os
from typing import NamedTuple, Protocol, Sequence, Tuple

class TrainingRow(NamedTuple):
	classification: str
	attributes: Tuple[str, ...] = ()
	vector: Tuple[float, ...] = ()
	ignore: Tuple[str, ...] = ()

class DataParser(Protocol):
	def parse_file(self, identifier: str) -> Sequence[TrainingRow]:
		...

def bucket_id(prefix, number):
	return "%s-%d" % (prefix, number)

class BucketFileParser:
	"""
	Reads one bucket file per identifier. dataFormat names the whitespace
	separated fields of every line, e.g. "attr attr num class":
	attr is categorical, num is continuous, class is the label and
	comment is carried along in TrainingRow.ignore.
	"""

	TOKENS = ("attr", "num", "class", "comment")

	def __init__(self, dataFormat, directory = ".", extension = ".txt"):
		self.format = dataFormat.split()
		self.directory = directory
		self.extension = extension

		for token in self.format:
			if (token not in self.TOKENS):
				raise ValueError("unknown field '%s' in data format '%s'" % (token, dataFormat))

		if (self.format.count("class") != 1):
			raise ValueError("data format '%s' needs exactly one class field" % dataFormat)

	def path(self, identifier):
		return os.path.join(self.directory, identifier + self.extension)

	def parse_line(self, line):
		tokens = line.split()

		if (len(tokens) != len(self.format)):
			raise ValueError("expected %d fields, got %d" % (len(self.format), len(tokens)))

		classification = None
		attributes = []
		vector = []
		ignore = []

		for kind, token in zip(self.format, tokens):
			if (kind == "attr"):
				attributes.append(token)
			elif (kind == "num"):
				vector.append(float(token))
			elif (kind == "class"):
				classification = token
			else:
				ignore.append(token)

		return TrainingRow(classification, tuple(attributes), tuple(vector), tuple(ignore))

	def parse_file(self, identifier):
		filename = self.path(identifier)

		rows = []

		with open(filename) as fp:
			lines = fp.readlines()

			for i, line in enumerate(lines, 1):
				if (not line.strip()):
					continue

				try:
					rows.append(self.parse_line(line))
				except ValueError as e:
					raise ValueError("%s:%d: %s" % (filename, i, e)) from e

		return rows
