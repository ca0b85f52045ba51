from __future__ import annotations

import sys

import click

from .config import load_env_files
from .errors import TFVarsError
from .logging_utils import setup_logging, get_logger
from .plan import render_plan
from .providers import available_providers, get_provider


logger = get_logger(__name__)


@click.group()
@click.option(
    "-C",
    "--chdir",
    "chdir",
    type=click.Path(file_okay=False, dir_okay=True, exists=True),
    default=".",
    help="작업 디렉토리. .env 파일을 읽고 tfvars 를 기본으로 쓰는 위치 (기본: 현재 디렉토리)",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="로그 레벨을 DEBUG로 올립니다.",
)
@click.pass_context
def main(ctx: click.Context, chdir: str, verbose: int) -> None:
    """Terraform 기반 kubetest2 deployer 용 tfvars 생성 CLI"""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["chdir"] = chdir
    ctx.obj["verbose"] = verbose
    # 하위 명령의 옵션이 파싱되기 전에 로드해야 envvar 로 반영된다.
    load_env_files(chdir)


@main.command(name="providers")
def list_providers() -> None:
    """등록된 provider 이름 목록을 출력"""
    for name in available_providers():
        click.echo(name)


def _output_dir(ctx: click.Context, directory: str | None) -> str:
    return directory or ctx.obj["chdir"]


def _dump_command(name: str) -> click.Command:
    provider = get_provider(name)

    @click.command(name="dump")
    @click.option(
        "--dir",
        "directory",
        type=click.Path(file_okay=False, dir_okay=True),
        default=None,
        help="tfvars 파일을 쓸 디렉토리 (기본: -C 디렉토리)",
    )
    @click.pass_context
    def dump(ctx: click.Context, directory: str | None, **values: str) -> None:
        """플래그 값으로 <provider>.auto.tfvars.json 을 생성"""
        provider.load_flags(values)
        provider.initialize()

        try:
            path = provider.dump_config(_output_dir(ctx, directory))
        except TFVarsError as e:
            logger.exception("tfvars 덤프 중 오류 발생")
            click.echo(f"[ERROR] tfvars 덤프 실패: {e}", err=True)
            sys.exit(1)

        click.echo(path)

    return provider.bind_flags(dump)


def _plan_command(name: str) -> click.Command:
    provider = get_provider(name)

    @click.command(name="plan")
    @click.option(
        "--dir",
        "directory",
        type=click.Path(file_okay=False, dir_okay=True),
        default=None,
        help="tfvars 파일이 쓰일 디렉토리 (기본: -C 디렉토리)",
    )
    @click.pass_context
    def plan(ctx: click.Context, directory: str | None, **values: str) -> None:
        """파일을 쓰지 않고 생성될 tfvars 내용을 요약 출력 (secret 은 마스킹)"""
        provider.load_flags(values)
        click.echo(render_plan(provider, _output_dir(ctx, directory)))

    return provider.bind_flags(plan)


def _provider_group(name: str) -> click.Group:
    group = click.Group(name=name, help=f"{name} provider 용 tfvars 명령")
    group.add_command(_dump_command(name))
    group.add_command(_plan_command(name))
    return group


for _name in available_providers():
    main.add_command(_provider_group(_name))
