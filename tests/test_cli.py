import json

from click.testing import CliRunner

from kubetest2_tf.cli import main


def _read(path) -> dict:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def test_providers_lists_vpc(tmp_path) -> None:
    result = CliRunner().invoke(main, ["-C", str(tmp_path), "providers"])

    assert result.exit_code == 0, result.output
    assert result.output.split() == ["vpc"]


def test_dump_writes_tfvars_into_chdir(tmp_path) -> None:
    result = CliRunner().invoke(
        main,
        ["-C", str(tmp_path), "vpc", "dump", "--vpc-name=test-vpc", "--vpc-region=us-south"],
    )

    assert result.exit_code == 0, result.output
    target = tmp_path / "vpc.auto.tfvars.json"
    assert str(target) in result.output
    data = _read(target)
    assert data["VPCName"] == "test-vpc"
    assert data["Region"] == "us-south"
    assert data["ResourceGroup"] == "Default"
    assert data["Zone"] == ""


def test_dump_uses_dir_option(tmp_path) -> None:
    out = tmp_path / "out"
    out.mkdir()

    result = CliRunner().invoke(
        main,
        ["-C", str(tmp_path), "vpc", "dump", "--dir", str(out), "--vpc-resource-group", "rg-1"],
    )

    assert result.exit_code == 0, result.output
    assert _read(out / "vpc.auto.tfvars.json")["ResourceGroup"] == "rg-1"
    assert not (tmp_path / "vpc.auto.tfvars.json").exists()


def test_dump_reads_only_secret_flags_from_environment(tmp_path) -> None:
    result = CliRunner().invoke(
        main,
        ["-C", str(tmp_path), "vpc", "dump", "--vpc-region", "us-south"],
        env={"VPC_API_KEY": "from-env", "VPC_ZONE": "us-south-1", "VPC_REGION": "eu-de"},
    )

    assert result.exit_code == 0, result.output
    data = _read(tmp_path / "vpc.auto.tfvars.json")
    assert data["Apikey"] == "from-env"
    # secret 이 아닌 플래그는 환경변수를 보지 않는다.
    assert data["Zone"] == ""
    assert data["Region"] == "us-south"


def test_explicit_api_key_flag_overrides_environment(tmp_path) -> None:
    result = CliRunner().invoke(
        main,
        ["-C", str(tmp_path), "vpc", "dump", "--vpc-api-key", "from-flag"],
        env={"VPC_API_KEY": "from-env"},
    )

    assert result.exit_code == 0, result.output
    assert _read(tmp_path / "vpc.auto.tfvars.json")["Apikey"] == "from-flag"


def test_stray_env_file_value_does_not_fill_unset_flag(tmp_path) -> None:
    (tmp_path / ".env").write_text("VPC_NAME=stray\nVPC_ZONE=stray-zone\n", encoding="utf-8")

    result = CliRunner().invoke(
        main, ["-C", str(tmp_path), "vpc", "dump", "--vpc-region=us-south"]
    )

    assert result.exit_code == 0, result.output
    data = _read(tmp_path / "vpc.auto.tfvars.json")
    assert data["VPCName"] == ""
    assert data["Zone"] == ""
    assert data["Region"] == "us-south"
    assert data["ResourceGroup"] == "Default"


def test_dump_reads_secrets_from_env_file(tmp_path) -> None:
    (tmp_path / ".env.secrets").write_text("VPC_API_KEY=file-key\n", encoding="utf-8")

    result = CliRunner().invoke(main, ["-C", str(tmp_path), "vpc", "dump"])

    assert result.exit_code == 0, result.output
    assert _read(tmp_path / "vpc.auto.tfvars.json")["Apikey"] == "file-key"


def test_dump_to_missing_directory_exits_with_error(tmp_path) -> None:
    result = CliRunner().invoke(
        main,
        ["-C", str(tmp_path), "vpc", "dump", "--dir", str(tmp_path / "missing")],
    )

    assert result.exit_code == 1
    assert "[ERROR]" in result.output
    assert not (tmp_path / "missing").exists()


def test_plan_masks_secret_and_lists_unset(tmp_path) -> None:
    result = CliRunner().invoke(
        main,
        ["-C", str(tmp_path), "vpc", "plan", "--vpc-name", "test-vpc", "--vpc-api-key", "s3cr3t"],
    )

    assert result.exit_code == 0, result.output
    assert "- VPCName: test-vpc" in result.output
    assert "- Apikey: ****" in result.output
    assert "s3cr3t" not in result.output
    assert "- SubnetName: (not set)" in result.output
    unset = result.output.split("## Unset variables", 1)[1]
    assert "- Region" in unset
    assert "- VPCName" not in unset
    # plan 은 파일을 만들지 않는다.
    assert not (tmp_path / "vpc.auto.tfvars.json").exists()


def test_dump_with_unencodable_value_exits_with_error(tmp_path) -> None:
    # 유효하지 않은 UTF-8 argv 바이트는 lone surrogate 로 들어온다.
    result = CliRunner().invoke(
        main,
        ["-C", str(tmp_path), "vpc", "dump", "--vpc-name", "bad\udcff"],
    )

    assert result.exit_code == 1
    assert "[ERROR]" in result.output
    assert not (tmp_path / "vpc.auto.tfvars.json").exists()
