"""Pruebas de los dispositivos simulados y del inyector de fallos."""

import numpy as np
import pytest

from control_lavado.domain.exceptions import DirtDetectorException, EngineException, WaterPumpException
from control_lavado.domain.models.laundry_batch import LaundryBatch
from control_lavado.domain.models.program_configuration import ProgramConfiguration
from control_lavado.domain.services.washing_machine import WashingMachine
from control_lavado.domain.value_objects.error_code import ErrorCode
from control_lavado.domain.value_objects.material import Material
from control_lavado.domain.value_objects.percentage import Percentage
from control_lavado.domain.value_objects.program import Program
from control_lavado.infrastructure.devices import SimulatedDirtDetector, SimulatedEngine, SimulatedWaterPump
from control_lavado.infrastructure.devices.fault_injector import FaultInjector


@pytest.fixture
def batch():
    return LaundryBatch(material_type=Material.COTTON, weight_kg=5)


class TestFaultInjector:

    def test_no_failure_by_default(self):
        FaultInjector().check("engine", "spin", EngineException)

    def test_forced_expected_failure(self):
        with pytest.raises(EngineException):
            FaultInjector(fail_on=["spin"]).check("engine", "spin", EngineException)

    def test_forced_unexpected_failure(self):
        with pytest.raises(RuntimeError):
            FaultInjector(unexpected_fail_on=["pour"]).check("water_pump", "pour", WaterPumpException)

    def test_always_fails_with_full_rate(self):
        injector = FaultInjector(failure_rate=1.0, rng=np.random.default_rng(0))

        with pytest.raises(WaterPumpException):
            injector.check("water_pump", "release", WaterPumpException)

    @pytest.mark.parametrize("rates", [(-0.1, 0.0), (0.0, 1.5), (0.6, 0.6)])
    def test_rejects_invalid_rates(self, rates):
        with pytest.raises(ValueError):
            FaultInjector(*rates)


class TestSimulatedDevices:

    def test_full_cycle_records_device_usage(self, batch):
        detector = SimulatedDirtDetector(dirt_degree=Percentage(30))
        engine = SimulatedEngine()
        water_pump = SimulatedWaterPump()

        status = WashingMachine(detector, engine, water_pump).start(
            batch, ProgramConfiguration(program=Program.AUTODETECT)
        )

        assert status.error_code == ErrorCode.NO_ERROR
        assert status.runned_program == Program.MEDIUM
        assert detector.calls == [("detect_dirt_degree", (batch,))]
        assert water_pump.calls == [("pour", (50.0,)), ("release", ())]
        assert engine.calls == [("run_washing", (90,)), ("spin", ())]
        assert water_pump.water_level == 0.0
        assert water_pump.total_poured == 50.0
        assert engine.minutes_washed == 90
        assert engine.spins == 1

    def test_random_detector_returns_percentage(self, batch):
        detector = SimulatedDirtDetector(rng=np.random.default_rng(1))

        assert 0 <= detector.detect_dirt_degree(batch).value <= 100

    def test_detector_failure(self, batch):
        detector = SimulatedDirtDetector(fault_injector=FaultInjector(fail_on=["detect_dirt_degree"]))

        with pytest.raises(DirtDetectorException):
            detector.detect_dirt_degree(batch)

    def test_pump_keeps_water_when_release_fails(self, batch):
        water_pump = SimulatedWaterPump(FaultInjector(fail_on=["release"]))
        engine = SimulatedEngine()

        status = WashingMachine(SimulatedDirtDetector(), engine, water_pump).start(
            batch, ProgramConfiguration(program=Program.SHORT)
        )

        assert status.error_code == ErrorCode.WATER_PUMP_FAILURE
        assert water_pump.water_level == 50.0
        assert engine.spins == 0

    def test_pump_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            SimulatedWaterPump().pour(-1)

    def test_unexpected_engine_failure_is_unknown_error(self, batch):
        engine = SimulatedEngine(FaultInjector(unexpected_fail_on=["run_washing"]))

        status = WashingMachine(SimulatedDirtDetector(), engine, SimulatedWaterPump()).start(
            batch, ProgramConfiguration(program=Program.LONG)
        )

        assert status.error_code == ErrorCode.UNKNOWN_ERROR
