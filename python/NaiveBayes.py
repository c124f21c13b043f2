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

from functools import cached_property
from loguru import logger
import numpy as np
import time

from DataParser import bucket_id
from TrainingAggregator import TrainingAggregator

class UnknownLabel(LookupError):
	def __init__(self, label):
		super().__init__("unknown class label %r" % (label,))
		self.label = label

class MissingEvidence(LookupError):
	def __init__(self, label, column, value = None):
		if (value is None):
			message = "no continuous values for class %r in column %d" % (label, column)
		else:
			message = "value %r never seen for class %r in column %d" % (value, label, column)
		super().__init__(message)
		self.label = label
		self.column = column
		self.value = value

class DegenerateClass(ValueError):
	def __init__(self, label, column, reason):
		if (label is None):
			super().__init__(reason)
		else:
			super().__init__("class %r, column %s: %s" % (label, column, reason))
		self.label = label
		self.column = column
		self.reason = reason

class NB:
	"""
	Naive Bayes over categorical (attr) and continuous (num) columns.

	The model is trained from every bucket <bucketPrefix>-<i>, i < numBuckets,
	except testBucketNumber. Derived statistics are built on first use and
	never change afterwards; the aggregator is frozen at that point.
	"""

	NUM_BUCKETS = 10;

	NO_CLASS = None

	def __init__(self, bucketPrefix, testBucketNumber, dataParser, numBuckets = NUM_BUCKETS):
		self.bucketPrefix = bucketPrefix
		self.testBucketNumber = testBucketNumber
		self.dataParser = dataParser
		self.numBuckets = numBuckets

		self.aggregator = TrainingAggregator()
		self.trained = False

		self.train()

	def train(self):
		start = int(round(time.time() * 100))

		for i in range(0, self.numBuckets):
			if (i == self.testBucketNumber):
				continue

			identifier = bucket_id(self.bucketPrefix, i)
			n = self.aggregator.ingest_all(self.dataParser.parse_file(identifier))

			logger.debug("-- Reading bucket {}: {} rows", identifier, n)

		end = int(round(time.time() * 100))

		logger.info("-- Training took: {}s ({} rows, {} classes)", (end - start) / 100, self.aggregator.total, len(self.aggregator.classCounts))

	def _freeze(self):
		if (not self.trained):
			self.aggregator.freeze()
			self.trained = True

	# Derived tables, built whole and then cached.

	@cached_property
	def priors(self):
		self._freeze()

		total = float(self.aggregator.total)

		return {label: count / total for label, count in self.aggregator.classCounts.items()}

	@cached_property
	def conditionals(self):
		self._freeze()

		classCounts = self.aggregator.classCounts

		return {key: count / float(classCounts[key[0]]) for key, count in self.aggregator.categoricalCounts.items()}

	@cached_property
	def means(self):
		self._freeze()

		classCounts = self.aggregator.classCounts

		return {key: total / float(classCounts[key[0]]) for key, total in self.aggregator.continuousSums.items()}

	@cached_property
	def deviations(self):
		self._freeze()

		classCounts = self.aggregator.classCounts
		means = self.means

		result = {}
		for key, values in self.aggregator.continuousValues.items():
			count = classCounts[key[0]]
			if (count < 2):
				continue

			squares = np.square(np.asarray(values, dtype = np.float64) - means[key])
			result[key] = float(np.sqrt(np.sum(squares) / (count - 1)))

		return result

	def _class_count(self, label):
		self._freeze()

		try:
			return self.aggregator.classCounts[label]
		except KeyError:
			raise UnknownLabel(label) from None

	def prior_probability(self, label):
		if (label not in self.priors):
			raise UnknownLabel(label)

		return self.priors[label]

	def conditional_probability(self, label, column, value):
		self._class_count(label)

		try:
			return self.conditionals[(label, column, value)]
		except KeyError:
			raise MissingEvidence(label, column, value) from None

	def mean(self, label, column):
		self._class_count(label)

		try:
			return self.means[(label, column)]
		except KeyError:
			raise MissingEvidence(label, column) from None

	def sample_standard_deviation(self, label, column):
		count = self._class_count(label)

		if ((label, column) not in self.means):
			raise MissingEvidence(label, column)

		if (count < 2):
			raise DegenerateClass(label, column, "sample standard deviation needs at least 2 rows, got %d" % count)

		return self.deviations[(label, column)]

	@staticmethod
	def gaussian_density(mean, standardDeviation, x):
		if (not standardDeviation > 0):
			raise DegenerateClass(None, None, "standard deviation must be positive, got %r" % standardDeviation)

		ePart = np.exp(-np.square(x - mean) / (2 * np.square(standardDeviation)))

		return float((1.0 / (np.sqrt(2 * np.pi) * standardDeviation)) * ePart)

	def scores(self, attributes, vector):
		self._freeze()

		result = {}

		for label, prior in self.priors.items():
			score = prior

			for column, value in enumerate(attributes, 1):
				try:
					score *= self.conditional_probability(label, column, value)
				except MissingEvidence:
					logger.debug("-- {!r} silenced: {!r} unseen in column {}", label, value, column)
					score = 0.0

			for column, x in enumerate(vector, 1):
				mean = self.mean(label, column)
				standardDeviation = self.sample_standard_deviation(label, column)

				try:
					score *= self.gaussian_density(mean, standardDeviation, x)
				except DegenerateClass as e:
					raise DegenerateClass(label, column, e.reason) from e

			result[label] = score

		return result

	def classify(self, attributes, vector):
		"""
		Maximum a posteriori label for one row.

		Labels are visited in sorted order and only a strictly higher score
		replaces the current best, so ties go to the smallest label. Returns
		NO_CLASS when every class scores zero.
		"""
		scores = self.scores(attributes, vector)

		best = self.NO_CLASS
		bestScore = 0.0

		for label in sorted(scores):
			if (scores[label] > bestScore):
				best = label
				bestScore = scores[label]

		return best

	def evaluate(self, testRows):
		start = int(round(time.time() * 100))

		totals = {}

		for row in testRows:
			classifiedAs = self.classify(row.attributes, row.vector)

			counts = totals.setdefault(row.classification, {})
			counts[classifiedAs] = counts.get(classifiedAs, 0) + 1

		end = int(round(time.time() * 100))

		logger.info("-- Classification took: {}s", (end - start) / 100)

		return totals

	def test_bucket(self, dataParser = None):
		if (dataParser is None):
			dataParser = self.dataParser

		return self.evaluate(dataParser.parse_file(bucket_id(self.bucketPrefix, self.testBucketNumber)))
