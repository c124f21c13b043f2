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

from typing import Optional
from pydantic import BaseModel, Field, model_validator
import os
import yaml

from DataParser import BucketFileParser

class ExperimentConfig(BaseModel):
	bucketDir: str
	bucketPrefix: str
	dataFormat: str

	numBuckets: int = Field(default = 10, ge = 2)
	testBucketNumber: int = Field(default = 0, ge = 0)
	extension: str = ".txt"

	logLevel: str = "INFO"
	logFile: Optional[str] = None

	@model_validator(mode = "after")
	def check_test_bucket(self):
		if (self.testBucketNumber >= self.numBuckets):
			raise ValueError("testBucketNumber %d out of range for %d buckets" % (self.testBucketNumber, self.numBuckets))
		return self

	@classmethod
	def load(cls, path):
		if (not os.path.exists(path)):
			raise FileNotFoundError("Config file not found: %s" % path)

		with open(path, "r", encoding = "utf-8") as f:
			raw = yaml.safe_load(f) or {}

		return cls(**raw)

	def parser(self):
		return BucketFileParser(self.dataFormat, self.bucketDir, self.extension)
