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
import yaml
from pydantic import ValidationError

from Config import ExperimentConfig
from DataParser import BucketFileParser

@pytest.fixture
def config_file(tmp_path):
	data = {
		"bucketDir": str(tmp_path),
		"bucketPrefix": "pima",
		"dataFormat": "num num num class",
		"testBucketNumber": 3,
		"logLevel": "DEBUG",
	}

	path = tmp_path / "bayes.yml"
	path.write_text(yaml.safe_dump(data), encoding="utf-8")
	return path

def test_load(config_file, tmp_path):
	config = ExperimentConfig.load(str(config_file))

	assert config.bucketPrefix == "pima"
	assert config.testBucketNumber == 3
	assert config.numBuckets == 10
	assert config.extension == ".txt"
	assert config.logLevel == "DEBUG"
	assert config.logFile is None

	parser = config.parser()
	assert isinstance(parser, BucketFileParser)
	assert parser.format == ["num", "num", "num", "class"]
	assert parser.path("pima-3") == str(tmp_path / "pima-3.txt")

def test_missing_file(tmp_path):
	with pytest.raises(FileNotFoundError):
		ExperimentConfig.load(str(tmp_path / "nope.yml"))

def test_test_bucket_out_of_range():
	with pytest.raises(ValidationError):
		ExperimentConfig(bucketDir=".", bucketPrefix="p", dataFormat="attr class", testBucketNumber=10)

def test_required_fields():
	with pytest.raises(ValidationError):
		ExperimentConfig(bucketDir=".", dataFormat="attr class")
