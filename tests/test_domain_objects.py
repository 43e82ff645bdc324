"""Pruebas de los objetos de valor, modelos y política de lavado."""

import pytest
from dataclasses import FrozenInstanceError

from control_lavado.domain.models.laundry_batch import LaundryBatch
from control_lavado.domain.models.laundry_status import LaundryStatus
from control_lavado.domain.models.program_configuration import ProgramConfiguration
from control_lavado.domain.services.wash_policy import WashPolicy
from control_lavado.domain.value_objects.error_code import ErrorCode, Result
from control_lavado.domain.value_objects.export_format import ExportFormat
from control_lavado.domain.value_objects.material import Material
from control_lavado.domain.value_objects.percentage import Percentage
from control_lavado.domain.value_objects.program import Program
from control_lavado.domain.value_objects.wash_stage import WashStage


class TestPercentage:

    @pytest.mark.parametrize("value", [0, 0.5, 40, 100])
    def test_accepts_values_in_range(self, value):
        assert Percentage(value).value == value

    @pytest.mark.parametrize("value", [-0.1, 100.1, 250])
    def test_rejects_values_out_of_range(self, value):
        with pytest.raises(ValueError):
            Percentage(value)

    @pytest.mark.parametrize("value", ["40", None, True])
    def test_rejects_non_numeric_values(self, value):
        with pytest.raises(ValueError):
            Percentage(value)

    def test_is_ordered(self):
        assert Percentage(30) < Percentage(70)
        assert Percentage(40) == Percentage(40.0)


class TestLaundryBatch:

    def test_is_immutable(self):
        batch = LaundryBatch(material_type=Material.JEANS, weight_kg=3)

        with pytest.raises(FrozenInstanceError):
            batch.weight_kg = 30

    @pytest.mark.parametrize("weight_kg", [0, -1, "3", float("nan"), float("inf")])
    def test_rejects_invalid_weight(self, weight_kg):
        with pytest.raises(ValueError):
            LaundryBatch(material_type=Material.JEANS, weight_kg=weight_kg)

    def test_rejects_unknown_material(self):
        with pytest.raises(ValueError):
            LaundryBatch(material_type="jeans", weight_kg=3)


class TestProgramConfiguration:

    def test_spin_is_enabled_by_default(self):
        assert ProgramConfiguration(program=Program.LONG).spin is True

    def test_autodetect(self):
        assert ProgramConfiguration(program=Program.AUTODETECT).is_autodetect()
        assert not ProgramConfiguration(program=Program.SHORT, spin=False).is_autodetect()

    def test_requires_program_enum(self):
        with pytest.raises(ValueError):
            ProgramConfiguration(program="long")


class TestLaundryStatus:

    def test_success(self):
        status = LaundryStatus.success(Program.MEDIUM)

        assert status.is_success()
        assert status.result == Result.SUCCESS
        assert status.error_code == ErrorCode.NO_ERROR
        assert status.runned_program == Program.MEDIUM
        assert status.stage == WashStage.DONE

    def test_error_carries_no_program(self):
        status = LaundryStatus.error(ErrorCode.ENGINE_FAILURE, WashStage.WASHING)

        assert not status.is_success()
        assert status.runned_program is None
        assert status.stage == WashStage.WASHING


class TestEnums:

    @pytest.mark.parametrize("text, material", [
        ("JEANS", Material.JEANS),
        ("syntetic", Material.SYNTHETIC),
        (" delicado ", Material.DELICATE),
        ("algodón", Material.COTTON),
    ])
    def test_material_from_string(self, text, material):
        assert Material.from_string(text) == material

    def test_material_from_invalid_string(self):
        with pytest.raises(ValueError):
            Material.from_string("seda")

    def test_delicate_materials(self):
        delicate = {m for m in Material if m.is_delicate()}

        assert delicate == {Material.WOOL, Material.SYNTHETIC, Material.DELICATE}

    @pytest.mark.parametrize("text, program", [
        ("long", Program.LONG),
        ("Medio", Program.MEDIUM),
        ("corto", Program.SHORT),
        ("auto", Program.AUTODETECT),
    ])
    def test_program_from_string(self, text, program):
        assert Program.from_string(text) == program

    def test_program_times(self):
        assert Program.LONG.time_in_minutes == 120
        assert Program.MEDIUM.time_in_minutes == 90
        assert Program.SHORT.time_in_minutes == 45
        assert Program.AUTODETECT.time_in_minutes is None
        assert not Program.AUTODETECT.is_runnable()

    def test_export_format_from_string(self):
        assert ExportFormat.from_string("CSV") == ExportFormat.CSV
        with pytest.raises(ValueError):
            ExportFormat.from_string("pdf")

    def test_terminal_stages(self):
        assert {s for s in WashStage if s.is_terminal()} == {WashStage.REJECTED, WashStage.DONE}


class TestWashPolicy:

    def test_default_max_weights(self):
        policy = WashPolicy()

        assert policy.max_weight_for(Material.JEANS) == 8.0
        assert policy.max_weight_for(Material.COTTON) == 8.0
        assert policy.max_weight_for(Material.DELICATE) == 4.0
        assert policy.max_weight_for(Material.SYNTHETIC) == 4.0

    def test_partial_config_overrides_defaults(self):
        policy = WashPolicy({"long_program_threshold": 80})

        assert policy.program_for_dirt(Percentage(70)) == Program.MEDIUM
        assert policy.config["medium_program_threshold"] == 20.0

    def test_program_selection_is_monotonic(self):
        policy = WashPolicy()
        order = [Program.SHORT, Program.MEDIUM, Program.LONG]

        ranks = [order.index(policy.program_for_dirt(Percentage(v))) for v in range(0, 101)]

        assert ranks == sorted(ranks)

    def test_water_amount(self):
        assert WashPolicy().water_amount(LaundryBatch(material_type=Material.WOOL, weight_kg=1.2)) == pytest.approx(12.0)

    @pytest.mark.parametrize("config", [
        {"max_weight_kg": 0},
        {"delicate_weight_ratio": 1.5},
        {"water_liters_per_kg": -1},
        {"long_program_threshold": 120},
        {"medium_program_threshold": 70},
        {"max_weight_kg": float("nan")},
        {"water_liters_per_kg": float("inf")},
        {"long_program_threshold": float("nan")},
        {"delicate_weight_ratio": None},
    ])
    def test_rejects_invalid_config(self, config):
        with pytest.raises(ValueError):
            WashPolicy(config)
