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

class TrainingAggregator:
	"""
	Raw counts and sums of the training rows, keyed by flat tuples:

	  classCounts        label -> rows
	  categoricalCounts  (label, column, value) -> occurrences
	  continuousSums     (label, column) -> sum of values
	  continuousValues   (label, column) -> every value seen

	Columns start at 1; categorical and continuous columns are numbered
	independently. Absent keys mean zero.
	"""

	def __init__(self):
		self.classCounts = {}
		self.categoricalCounts = {}
		self.continuousSums = {}
		self.continuousValues = {}

		self.frozen = False

	@property
	def total(self):
		return sum(self.classCounts.values())

	def labels(self):
		return list(self.classCounts)

	def freeze(self):
		self.frozen = True

	def _check_frozen(self):
		if (self.frozen):
			raise RuntimeError("aggregator is frozen, build a new model to retrain")

	def ingest(self, row):
		self._check_frozen()

		label = row.classification
		self.classCounts[label] = self.classCounts.get(label, 0) + 1

		for column, value in enumerate(row.attributes, 1):
			key = (label, column, value)
			self.categoricalCounts[key] = self.categoricalCounts.get(key, 0) + 1

		for column, value in enumerate(row.vector, 1):
			key = (label, column)
			self.continuousSums[key] = self.continuousSums.get(key, 0.0) + value
			self.continuousValues.setdefault(key, []).append(value)

	def ingest_all(self, rows):
		n = 0

		for row in rows:
			self.ingest(row)
			n += 1

		return n

	def merge(self, other):
		self._check_frozen()

		for label, count in other.classCounts.items():
			self.classCounts[label] = self.classCounts.get(label, 0) + count

		for key, count in other.categoricalCounts.items():
			self.categoricalCounts[key] = self.categoricalCounts.get(key, 0) + count

		for key, total in other.continuousSums.items():
			self.continuousSums[key] = self.continuousSums.get(key, 0.0) + total

		for key, values in other.continuousValues.items():
			self.continuousValues.setdefault(key, []).extend(values)

		return self
