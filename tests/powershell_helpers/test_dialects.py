import pytest

from pidlist.powershell_helpers.dialects import POWERSHELL_BASE_ARGUMENTS, QueryDialect, select_dialect


@pytest.mark.parametrize("version", [3, 4, 5, 7, 100])
def test_modern_versions_use_cim(version):
    assert select_dialect(version) is QueryDialect.CIM


@pytest.mark.parametrize("version", [2, 1, 0, -1])
def test_older_versions_use_wmi(version):
    assert select_dialect(version) is QueryDialect.WMI


def test_queries_request_parent_and_process_ids_without_headers():
    assert QueryDialect.CIM.query == (
        "Get-CimInstance -ClassName Win32_Process | Select-Object ParentProcessId, ProcessId | Format-Table -HideTableHeaders"
    )
    assert QueryDialect.WMI.query == (
        "Get-WmiObject -Class Win32_Process | Select-Object ParentProcessId, ProcessId | Format-Table -HideTableHeaders"
    )


def test_arguments_disable_profile_and_prompts():
    arguments = QueryDialect.CIM.arguments()

    assert arguments[:3] == POWERSHELL_BASE_ARGUMENTS == ("-NoProfile", "-NonInteractive", "-Command")
    assert arguments[3] == QueryDialect.CIM.query
    assert len(arguments) == 4
