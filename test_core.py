"""
Core tests
- ValidationResult construction and immutability
- Batch validation and the fail-fast helpers
- Metadata accessors
- Pak registry
- Config (JSON file + environment) and logger setup
"""
import copy
import dataclasses
import json
import logging
import os
import pickle
import tempfile
import unittest
from unittest.mock import patch

from pakvalidate import (
    BatchValidationResult,
    Config,
    Pak,
    ValidationError,
    ValidationResult,
    accessors,
    ensure_valid,
    validate_all,
)
from pakvalidate.core.config import ENV_LOG_FILE, ENV_LOG_LEVEL
from pakvalidate.utils.logger import LOG_FORMAT, get_logger, setup_logger

VALID_CNIC = "35202-1234567-1"
VALID_MOBILE = "03001234567"
VALID_IBAN = "PK36SCBL0000001123456702"


class TestValidationResult(unittest.TestCase):
    """ValidationResult"""

    def test_success(self):
        result = ValidationResult.success("abc", {"Key": "Value"})
        self.assertTrue(result.is_valid)
        self.assertIsNone(result.error_message)
        self.assertEqual(result.sanitized, "abc")
        self.assertEqual(result.get("Key"), "Value")
        self.assertIsNone(result.get("Missing"))
        self.assertEqual(str(result), "Valid (abc)")

    def test_success_without_metadata(self):
        result = ValidationResult.success()
        self.assertTrue(result.is_valid)
        self.assertIsNone(result.sanitized)
        self.assertEqual(len(result.metadata), 0)

    def test_failure(self):
        result = ValidationResult.failure("Bad input")
        self.assertFalse(result.is_valid)
        self.assertEqual(result.error_message, "Bad input")
        self.assertIsNone(result.sanitized)
        self.assertEqual(len(result.metadata), 0)
        self.assertEqual(str(result), "Invalid: Bad input")

    def test_metadata_is_a_frozen_copy(self):
        source = {"Key": "Value"}
        result = ValidationResult.success("abc", source)
        source["Key"] = "Changed"
        self.assertEqual(result.metadata["Key"], "Value")
        with self.assertRaises(TypeError):
            result.metadata["Key"] = "Other"

    def test_result_is_immutable(self):
        result = ValidationResult.failure("Bad input")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            result.is_valid = True

    def test_metadata_keeps_insertion_order(self):
        result = ValidationResult.success("x", {"B": "2", "A": "1", "C": "3"})
        self.assertEqual(list(result.metadata), ["B", "A", "C"])

    def test_constructor_rejects_contradictory_fields(self):
        for kwargs in [
            {"is_valid": True, "error_message": "x"},
            {"is_valid": False},
            {"is_valid": False, "error_message": "x", "sanitized": "abc"},
            {"is_valid": False, "error_message": "x", "metadata": {"Key": "Value"}},
        ]:
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ValueError):
                    ValidationResult(**kwargs)

    def test_constructor_freezes_plain_dict_metadata(self):
        source = {"Key": "Value"}
        result = ValidationResult(is_valid=True, sanitized="abc", metadata=source)
        source["Key"] = "Changed"
        self.assertEqual(result.metadata["Key"], "Value")
        with self.assertRaises(TypeError):
            result.metadata["Key"] = "Other"

    def test_hashable(self):
        first = ValidationResult.success("abc", {"Key": "Value"})
        second = ValidationResult.success("abc", {"Key": "Value"})
        self.assertEqual(hash(first), hash(second))
        self.assertEqual(len({first, second, ValidationResult.failure("Bad input")}), 2)

    def test_copy_and_pickle(self):
        result = Pak.iban.validate(VALID_IBAN)
        for clone in [copy.copy(result), copy.deepcopy(result),
                      pickle.loads(pickle.dumps(result))]:
            with self.subTest(clone=type(clone).__name__):
                self.assertEqual(clone, result)
                with self.assertRaises(TypeError):
                    clone.metadata["BankCode"] = "XXXX"

        failure = ValidationResult.failure("Bad input")
        self.assertEqual(copy.deepcopy(failure), failure)


class TestBatchValidation(unittest.TestCase):
    """validate_all / BatchValidationResult"""

    def test_all_valid(self):
        batch = validate_all(
            ("Cnic", lambda: Pak.cnic.validate(VALID_CNIC)),
            ("Mobile", lambda: Pak.mobile.validate(VALID_MOBILE)),
        )
        self.assertTrue(batch.is_valid)
        self.assertFalse(batch.is_invalid)
        self.assertEqual(len(batch.errors), 0)
        self.assertEqual(list(batch.results), ["Cnic", "Mobile"])
        batch.raise_if_invalid()

    def test_collects_failures_in_input_order(self):
        batch = validate_all(
            ("Mobile", lambda: Pak.mobile.validate("invalid")),
            ("Cnic", lambda: Pak.cnic.validate(VALID_CNIC)),
            ("Iban", lambda: Pak.iban.validate(None)),
        )
        self.assertFalse(batch.is_valid)
        self.assertTrue(batch.is_invalid)
        self.assertEqual([field for field, _ in batch.get_errors()], ["Mobile", "Iban"])
        self.assertEqual(batch.get_error("Iban"), "IBAN is required.")
        self.assertIsNone(batch.get_error("Cnic"))
        self.assertIsNone(batch.get_error("NotValidated"))
        self.assertEqual(len(batch.results), 3)

    def test_raise_if_invalid(self):
        batch = validate_all(
            ("Cnic", lambda: Pak.cnic.validate("bad")),
            ("Mobile", lambda: Pak.mobile.validate("bad")),
        )
        with self.assertRaises(ValidationError) as ctx:
            batch.raise_if_invalid()

        self.assertEqual(str(ctx.exception), "Validation failed for: Cnic, Mobile")
        self.assertEqual(ctx.exception.fields, ["Cnic", "Mobile"])
        self.assertEqual(ctx.exception.field, "Cnic")
        self.assertEqual(set(ctx.exception.errors), {"Cnic", "Mobile"})

    def test_empty_batch_is_valid(self):
        batch = validate_all()
        self.assertTrue(batch.is_valid)
        self.assertEqual(batch.get_errors(), [])

    def test_empty_error_message_gets_default(self):
        batch = BatchValidationResult([("Field", ValidationResult(is_valid=False, error_message=""))])
        self.assertEqual(batch.get_error("Field"), "Validation failed")

    def test_duplicate_field_last_wins(self):
        batch = BatchValidationResult([
            ("Field", ValidationResult.failure("first")),
            ("Field", ValidationResult.success("ok")),
        ])
        self.assertTrue(batch.is_valid)
        self.assertTrue(batch.results["Field"].is_valid)

        batch = BatchValidationResult([
            ("Field", ValidationResult.success("ok")),
            ("Field", ValidationResult.failure("second")),
        ])
        self.assertEqual(batch.get_error("Field"), "second")

    def test_mappings_are_read_only(self):
        batch = validate_all(("Cnic", lambda: Pak.cnic.validate("bad")))
        with self.assertRaises(TypeError):
            batch.errors["Cnic"] = "changed"
        with self.assertRaises(TypeError):
            batch.results["Other"] = ValidationResult.success()

    def test_thunks_run_in_order(self):
        calls = []

        def thunk(name):
            def run():
                calls.append(name)
                return ValidationResult.success(name)
            return run

        validate_all(("A", thunk("A")), ("B", thunk("B")), ("C", thunk("C")))
        self.assertEqual(calls, ["A", "B", "C"])

    def test_pak_validate_all_delegates(self):
        batch = Pak.validate_all(("Iban", lambda: Pak.iban.validate(VALID_IBAN)))
        self.assertIsInstance(batch, BatchValidationResult)
        self.assertTrue(batch.is_valid)


class TestEnsureValid(unittest.TestCase):
    """ensure_valid / ValidationError"""

    def test_returns_valid_result(self):
        result = Pak.cnic.validate(VALID_CNIC)
        self.assertIs(ensure_valid(result), result)

    def test_raises_with_field(self):
        with self.assertRaises(ValidationError) as ctx:
            ensure_valid(Pak.cnic.validate(None), field="Applicant CNIC")

        self.assertEqual(ctx.exception.message, "Applicant CNIC: CNIC is required.")
        self.assertEqual(ctx.exception.field, "Applicant CNIC")
        self.assertEqual(ctx.exception.errors, {"Applicant CNIC": "CNIC is required."})

    def test_raises_without_field(self):
        with self.assertRaises(ValidationError) as ctx:
            ensure_valid(Pak.mobile.validate("123"))

        self.assertTrue(str(ctx.exception).startswith("Invalid Pakistani mobile number"))
        self.assertIsNone(ctx.exception.field)
        self.assertEqual(ctx.exception.fields, [])

    def test_empty_message(self):
        with self.assertRaises(ValidationError) as ctx:
            ensure_valid(ValidationResult(is_valid=False, error_message=""))
        self.assertEqual(str(ctx.exception), "Validation failed")


class TestAccessors(unittest.TestCase):
    """Metadata accessor functions"""

    def test_cnic_accessors(self):
        result = Pak.cnic.validate(VALID_CNIC)
        self.assertEqual(accessors.gender(result), "Male")
        self.assertEqual(accessors.province(result), "Punjab")
        self.assertEqual(accessors.locality_code(result), "35202")
        self.assertEqual(accessors.formatted(result), "35202-1234567-1")

    def test_mobile_accessors(self):
        result = Pak.mobile.validate("+923451234567")
        self.assertEqual(accessors.carrier(result), "Telenor")
        self.assertEqual(accessors.local_format(result), "03451234567")
        self.assertEqual(accessors.international_format(result), "+923451234567")
        self.assertEqual(accessors.e164(result), "+923451234567")
        self.assertEqual(accessors.prefix(result), "0345")

    def test_iban_accessors(self):
        result = Pak.iban.validate(VALID_IBAN)
        self.assertEqual(accessors.bank_code(result), "SCBL")
        self.assertEqual(accessors.bank_name(result), "Standard Chartered Pakistan")
        self.assertEqual(accessors.account_number(result), "0000001123456702")
        self.assertEqual(accessors.check_digits(result), "36")

    def test_other_accessors(self):
        self.assertEqual(accessors.ntn_type(Pak.ntn.validate("1234567-8")), "Standard")
        self.assertEqual(accessors.jurisdiction(Pak.strn.validate("1312345678901")), "RTO Islamabad")
        self.assertEqual(accessors.region_code(Pak.strn.validate("1312345678901")), "13")
        self.assertEqual(accessors.region(Pak.postal_code.validate("44000")), "Islamabad")
        self.assertEqual(accessors.region_prefix(Pak.postal_code.validate("44000")), "44")

        landline = Pak.landline.validate("021-12345678")
        self.assertEqual(accessors.city(landline), "Karachi")
        self.assertEqual(accessors.area_code(landline), "021")
        self.assertEqual(accessors.subscriber_number(landline), "12345678")

        plate = Pak.vehicle_plate.validate("G-1234")
        self.assertEqual(accessors.registration_city(plate), "Government (Federal)")
        self.assertEqual(accessors.plate_prefix(plate), "G")
        self.assertEqual(accessors.plate_number(plate), "1234")
        self.assertEqual(accessors.plate_type(plate), "Government/Diplomatic")

    def test_absent_key_or_failure_returns_none(self):
        self.assertIsNone(accessors.gender(Pak.cnic.validate("invalid")))
        self.assertIsNone(accessors.bank_name(Pak.cnic.validate(VALID_CNIC)))
        self.assertIsNone(accessors.province(Pak.cnic.validate("01234-5678901-2")))
        self.assertIsNone(accessors.get_metadata(None, accessors.GENDER))
        self.assertEqual(accessors.get_metadata(Pak.cnic.validate(VALID_CNIC), "Gender"), "Male")


class TestPakRegistry(unittest.TestCase):
    """Pak.VALIDATORS / Pak.validate"""

    def test_registry_names(self):
        self.assertEqual(set(Pak.VALIDATORS), {
            "cnic", "ntn", "strn", "iban", "mobile", "landline", "postal_code", "vehicle_plate",
        })

    def test_validate_by_name(self):
        for kind, value in [
            ("cnic", VALID_CNIC),
            ("ntn", "1234567-8"),
            ("strn", "1312345678901"),
            ("iban", VALID_IBAN),
            ("mobile", VALID_MOBILE),
            ("landline", "051-1234567"),
            ("postal_code", "44000"),
            ("vehicle_plate", "LEA-1234"),
        ]:
            with self.subTest(kind=kind):
                self.assertTrue(Pak.validate(kind, value).is_valid)
                self.assertTrue(Pak.is_valid(kind, value))
                self.assertFalse(Pak.is_valid(kind, None))

    def test_unknown_kind(self):
        with self.assertRaises(KeyError):
            Pak.validate("passport", "AB1234567")

    def test_registry_is_read_only(self):
        with self.assertRaises(TypeError):
            Pak.VALIDATORS["passport"] = Pak.cnic.validate

    def test_ntn_shares_cnic_validator(self):
        self.assertIs(Pak.ntn.cnic_validator, Pak.cnic)

    def test_validators_are_callable(self):
        self.assertEqual(Pak.cnic(VALID_CNIC), Pak.cnic.validate(VALID_CNIC))


class TestConfig(unittest.TestCase):
    """Config: JSON file + environment overrides"""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self.temp_dir.name, "pakvalidate.json")

        # Isolate from the caller's environment
        env_patch = patch.dict(os.environ)
        env_patch.start()
        self.addCleanup(env_patch.stop)
        os.environ.pop(ENV_LOG_LEVEL, None)
        os.environ.pop(ENV_LOG_FILE, None)

    def tearDown(self):
        self.temp_dir.cleanup()

    def write_config(self, data):
        with open(self.config_path, "w", encoding="utf-8") as f:
            f.write(data if isinstance(data, str) else json.dumps(data))

    def test_defaults_without_file(self):
        config = Config(self.config_path)
        self.assertEqual(config.get_log_level(), "WARNING")
        self.assertIsNone(config.get_log_file())

    def test_reads_json_file(self):
        self.write_config({"log_level": "debug", "log_file": "out.log"})
        config = Config(self.config_path)
        self.assertEqual(config.get_log_level(), "DEBUG")
        self.assertEqual(config.get_log_file(), "out.log")

    def test_environment_overrides_file(self):
        self.write_config({"log_level": "DEBUG", "log_file": "out.log"})
        os.environ[ENV_LOG_LEVEL] = "ERROR"
        os.environ[ENV_LOG_FILE] = "env.log"

        config = Config(self.config_path)
        self.assertEqual(config.get_log_level(), "ERROR")
        self.assertEqual(config.get_log_file(), "env.log")

    def test_invalid_level_falls_back(self):
        self.write_config({"log_level": "LOUD"})
        self.assertEqual(Config(self.config_path).get_log_level(), "WARNING")

    def test_malformed_file_is_ignored(self):
        self.write_config("{not json")
        with self.assertLogs("PakValidate.config", level="ERROR"):
            config = Config(self.config_path)
        self.assertEqual(config.get_log_level(), "WARNING")

    def test_non_object_file_is_ignored(self):
        self.write_config([1, 2, 3])
        with self.assertLogs("PakValidate.config", level="ERROR"):
            config = Config(self.config_path)
        self.assertIsNone(config.get_log_file())

    def test_reload(self):
        config = Config(self.config_path)
        self.write_config({"log_level": "INFO"})
        config.load()
        self.assertEqual(config.get_log_level(), "INFO")


class TestLogger(unittest.TestCase):
    """setup_logger / get_logger"""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config = Config(os.path.join(self.temp_dir.name, "missing.json"))
        self.config.settings["log_level"] = "INFO"
        self.config.settings["log_file"] = None

    def tearDown(self):
        self.temp_dir.cleanup()

    def close_logger(self, logger):
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_console_only_by_default(self):
        logger = setup_logger("PakValidate.test.console", config=self.config)
        self.addCleanup(self.close_logger, logger)

        self.assertEqual(logger.level, logging.INFO)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], logging.StreamHandler)
        self.assertEqual(logger.handlers[0].formatter._fmt, LOG_FORMAT)

    def test_file_handler_when_configured(self):
        log_file = os.path.join(self.temp_dir.name, "pakvalidate.log")
        logger = setup_logger("PakValidate.test.file", log_file=log_file, config=self.config)

        logger.info("written to file")
        self.close_logger(logger)

        with open(log_file, encoding="utf-8") as f:
            content = f.read()
        self.assertIn("PakValidate.test.file - INFO - written to file", content)

    def test_setup_is_idempotent(self):
        first = setup_logger("PakValidate.test.idempotent", config=self.config)
        self.addCleanup(self.close_logger, first)
        second = setup_logger("PakValidate.test.idempotent", config=self.config)

        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 1)

    def test_get_logger_default(self):
        self.assertEqual(get_logger().name, "PakValidate")

    def test_failures_are_logged(self):
        with self.assertLogs("PakValidate", level="WARNING") as logs:
            with self.assertRaises(ValidationError):
                ensure_valid(Pak.cnic.validate(None), field="CNIC")
        self.assertIn("CNIC: CNIC is required.", logs.output[0])


if __name__ == "__main__":
    unittest.main()
