from cli.list_algorithms import list_algorithms
from models.algorithm import Algorithm
from models.settings import HashingSettings


def test_list_algorithms_shows_every_algorithm(runner, cli_obj):
    result = runner.invoke(list_algorithms, [], obj=cli_obj)
    assert result.exit_code == 0
    assert "Supported Algorithms" in result.output
    for algorithm in Algorithm:
        assert algorithm.value in result.output


def test_list_algorithms_widths(runner, cli_obj):
    lines = runner.invoke(list_algorithms, [], obj=cli_obj).output.splitlines()
    md5_row = next(line for line in lines if " md5 " in line)
    assert "128" in md5_row and "32" in md5_row
    sha512_row = next(line for line in lines if "sha2-512" in line)
    assert "512" in sha512_row and "128" in sha512_row


def test_list_algorithms_marks_configured_default(runner, cli_obj):
    lines = runner.invoke(list_algorithms, [], obj=cli_obj).output.splitlines()
    assert "✓" in next(line for line in lines if "blake3" in line)

    cli_obj["settings"] = HashingSettings(algorithm=Algorithm.SHA1)
    lines = runner.invoke(list_algorithms, [], obj=cli_obj).output.splitlines()
    assert "✓" not in next(line for line in lines if "blake3" in line)
    assert "✓" in next(line for line in lines if "sha1" in line)
