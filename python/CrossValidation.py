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

from NaiveBayes import NB

def merge_tallies(tallies):
	merged = {}

	for tally in tallies:
		for realClass, row in tally.items():
			counts = merged.setdefault(realClass, {})
			for classifiedAs, n in row.items():
				counts[classifiedAs] = counts.get(classifiedAs, 0) + n

	return merged

def accuracy(tally):
	"""(correct, total) of a confusion tally; NO_CLASS predictions are never correct."""
	cor = 0
	total = 0

	for realClass, row in tally.items():
		for classifiedAs, n in row.items():
			total += n
			if (classifiedAs == realClass):
				cor += n

	return cor, total

def tenfold(bucketPrefix, dataParser, numBuckets = NB.NUM_BUCKETS):
	tallies = []

	for i in range(0, numBuckets):
		logger.info("-- Fold {}/{}", i + 1, numBuckets)

		nb = NB(bucketPrefix, i, dataParser, numBuckets)
		tallies.append(nb.test_bucket())

	return merge_tallies(tallies)
