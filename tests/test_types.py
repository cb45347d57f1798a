"""
Unit tests for the cgv2 domain types
"""

import unittest
import os
import sys

# Add cgv2 to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cgv2.common import Max
from cgv2.controller import ControllerType, subtree_control_command
from cgv2.cgroup import CGroupType, Freeze
from cgv2.cpu import CPUMax
from cgv2.io import DeviceNumber, Ctrl
from cgv2.psi import PSIMetric, CPUPressure, MemoryPressure, IOPressure
from cgv2.exceptions import MalformedField


class TestMax(unittest.TestCase):
    """Test the max/bounded sentinel"""

    def test_parse(self):
        self.assertEqual(Max.parse("max"), Max.unbounded())
        self.assertTrue(Max.parse("max").is_unbounded)
        self.assertEqual(Max.parse("15"), Max.bounded(15))
        self.assertFalse(Max.parse("15").is_unbounded)

    def test_parse_rejects_other_tokens(self):
        for bad in ["Max", "-1", "", "1.5", "unlimited"]:
            with self.assertRaises(MalformedField):
                Max.parse(bad)

    def test_round_trip(self):
        for value in [Max(), Max(0), Max(15), Max(2 ** 63)]:
            self.assertEqual(Max.parse(value.format()), value)

    def test_large_bounds(self):
        # memory limits exceed 32 bits
        self.assertEqual(Max.parse("8589934592").value, 8589934592)

    def test_invalid_construction(self):
        with self.assertRaises(ValueError):
            Max(-1)
        with self.assertRaises(ValueError):
            Max(True)

    def test_coerce(self):
        self.assertEqual(Max.coerce(None), Max())
        self.assertEqual(Max.coerce(10), Max(10))
        self.assertEqual(Max.coerce(Max(3)), Max(3))
        self.assertEqual(str(Max()), "max")


class TestControllerType(unittest.TestCase):
    """Test controller names and the subtree_control command"""

    def test_round_trip(self):
        for controller in ControllerType.all():
            self.assertEqual(ControllerType.parse(controller.format()), controller)

    def test_names(self):
        self.assertEqual([c.format() for c in ControllerType.all()],
                         ["cpuset", "cpu", "io", "memory", "pids"])

    def test_unknown(self):
        with self.assertRaises(MalformedField):
            ControllerType.parse("hugetlb")
        with self.assertRaises(MalformedField):
            ControllerType.parse("CPU")

    def test_command(self):
        command = subtree_control_command([ControllerType.MEMORY, ControllerType.PIDS],
                                          [ControllerType.IO])
        self.assertEqual(command, "+memory +pids -io")

    def test_command_without_disables(self):
        self.assertEqual(subtree_control_command([ControllerType.CPU]), "+cpu")
        self.assertEqual(subtree_control_command([ControllerType.CPU], []), "+cpu")

    def test_command_only_disables(self):
        self.assertEqual(subtree_control_command([], [ControllerType.IO]), "-io")


class TestCGroupTypes(unittest.TestCase):
    """Test cgroup.type and cgroup.freeze values"""

    def test_cgroup_type(self):
        self.assertEqual(CGroupType.parse("domain"), CGroupType.DOMAIN)
        self.assertEqual(CGroupType.parse("domain threaded"), CGroupType.DOMAIN_THREADED)
        self.assertEqual(CGroupType.parse("domain invalid"), CGroupType.DOMAIN_INVALID)
        self.assertEqual(CGroupType.parse("threaded"), CGroupType.THREADED)

    def test_cgroup_type_bogus(self):
        with self.assertRaises(MalformedField):
            CGroupType.parse("bogus")

    def test_freeze(self):
        self.assertEqual(Freeze.parse("1"), Freeze(True))
        self.assertFalse(Freeze.parse("0"))
        self.assertEqual(Freeze(True).format(), "1")
        with self.assertRaises(MalformedField):
            Freeze.parse("yes")


class TestCPUMax(unittest.TestCase):
    """Test cpu.max values"""

    def test_parse(self):
        self.assertEqual(CPUMax.parse("max 100000"), CPUMax(Max(), 100000))
        self.assertEqual(CPUMax.parse("50000 100000"), CPUMax(Max(50000), 100000))

    def test_parse_single_token(self):
        self.assertEqual(CPUMax.parse("50000"), CPUMax(Max(50000), None))

    def test_parse_malformed(self):
        for bad in ["", "max max", "1 2 3", "-1 100000"]:
            with self.assertRaises(MalformedField):
                CPUMax.parse(bad)

    def test_format(self):
        self.assertEqual(CPUMax(Max(50000), 100000).format(), "50000 100000")
        self.assertEqual(CPUMax(Max(), None).format(), "max")


class TestDeviceNumber(unittest.TestCase):
    """Test maj:min device numbers"""

    def test_parse(self):
        self.assertEqual(DeviceNumber.parse("8:0"), DeviceNumber(maj=8, min=0))
        self.assertEqual(str(DeviceNumber(259, 1)), "259:1")

    def test_hashable(self):
        table = {DeviceNumber.parse("8:16"): "sdb"}
        self.assertEqual(table[DeviceNumber(8, 16)], "sdb")

    def test_malformed(self):
        for bad in ["8", "8:", ":0", "8:0:1", "a:b"]:
            with self.assertRaises(MalformedField):
                DeviceNumber.parse(bad)

    def test_ctrl(self):
        self.assertEqual(Ctrl.parse("auto"), Ctrl.AUTO)
        self.assertEqual(Ctrl.parse("user"), Ctrl.USER)
        with self.assertRaises(MalformedField):
            Ctrl.parse("manual")


class TestPressure(unittest.TestCase):
    """Test pressure stall information parsing"""

    SOME = "some avg10=0.00 avg60=1.50 avg300=0.00 total=42"
    FULL = "full avg10=0.25 avg60=0.10 avg300=0.05 total=7"

    def test_metric(self):
        metric = PSIMetric.parse(self.SOME)
        self.assertEqual(metric.key, "some")
        self.assertEqual(metric.avg60, 1.5)
        self.assertEqual(metric.total, 42)

    def test_cpu_pressure(self):
        pressure = CPUPressure.parse(self.SOME)
        self.assertEqual(pressure.some.avg60, 1.5)
        self.assertEqual(pressure.some.total, 42)

    def test_cpu_pressure_ignores_full(self):
        pressure = CPUPressure.parse(f"{self.SOME}\n{self.FULL}")
        self.assertEqual(pressure.some.total, 42)

    def test_memory_pressure(self):
        pressure = MemoryPressure.parse(f"{self.SOME}\n{self.FULL}")
        self.assertEqual(pressure.some.total, 42)
        self.assertEqual(pressure.full.avg10, 0.25)
        self.assertEqual(pressure.full.key, "full")

    def test_memory_pressure_requires_full(self):
        with self.assertRaises(MalformedField):
            MemoryPressure.parse(self.SOME)

    def test_io_pressure(self):
        pressure = IOPressure.parse(f"{self.SOME}\n{self.FULL}")
        self.assertIsInstance(pressure, IOPressure)
        self.assertEqual(pressure.full.total, 7)

    def test_malformed_metric(self):
        with self.assertRaises(MalformedField):
            PSIMetric.parse("some avg10=high")
        with self.assertRaises(MalformedField):
            CPUPressure.parse("full avg10=0.00 avg60=0.00 avg300=0.00 total=0")


if __name__ == '__main__':
    unittest.main()
