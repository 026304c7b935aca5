# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Install the project's own artifacts into the local Maven repository.

Static analysis of a multi-module project needs every sibling module resolvable
from the local repository. The installer flattens the root POM, then walks each
``pom.xml`` and installs the POM, the (original) jar, the war and the classes
jar that a previous build left in ``target/``.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Final

from ..errors import MavenEvaluationError, MavenExecutionError, MavenInstallError
from ..interfaces import StaticCheckUtils
from ..logging import info, warn
from .evaluate import evaluate
from .execute import execute
from .options import EvaluateOptions, ExecuteOptions

ROOT_POM: Final[str] = "pom.xml"
POM_GLOB: Final[str] = "**/pom.xml"
FLATTEN_GOAL: Final[str] = "flatten:flatten"
INSTALL_FILE_GOAL: Final[str] = "install:install-file"
SKIPPED_DIRECTORIES: Final[frozenset[str]] = frozenset({"node_modules", "target"})


def install_maven_artifacts(utils: StaticCheckUtils, options: EvaluateOptions, *, use_emoji: bool = True) -> None:
    """Install every module of the project rooted at the working directory.

    Args:
        utils: Capability bundle used to launch Maven and probe files.
        options: Settings and local repository paths forwarded to each run.
        use_emoji: Toggle emoji prefixes on progress messages.

    Raises:
        MavenInstallError: When the root POM is missing or any step fails.
    """

    if not utils.file_exists(ROOT_POM):
        raise MavenInstallError(f"failed to install maven artifacts: '{ROOT_POM}' not found")
    try:
        _flatten_pom(options, utils)
    except MavenExecutionError as exc:
        raise MavenInstallError(f"failed to flatten '{ROOT_POM}': {exc}") from exc

    for pom_file in module_pom_files(utils):
        info(f"Installing maven artifacts from module: {pom_file}", use_emoji=use_emoji)
        module_options = EvaluateOptions(
            pom_path=pom_file,
            project_settings_file=options.project_settings_file,
            global_settings_file=options.global_settings_file,
            m2_path=options.m2_path,
        )
        try:
            packaging = evaluate(module_options, "project.packaging", utils)
        except (MavenEvaluationError, MavenExecutionError) as exc:
            raise MavenInstallError(f"failed to evaluate packaging of '{pom_file}': {exc}") from exc
        if packaging == "pom":
            _install_file(pom_file, pom_file, "", module_options, utils)
        else:
            _install_jar_war_artifacts(pom_file, module_options, utils, use_emoji=use_emoji)


def module_pom_files(utils: StaticCheckUtils) -> list[str]:
    """Return every ``pom.xml`` of the project, skipping build and vendor trees."""

    return [
        pom_file
        for pom_file in utils.glob(POM_GLOB)
        if not SKIPPED_DIRECTORIES.intersection(PurePosixPath(pom_file).parts[:-1])
    ]


def _flatten_pom(options: EvaluateOptions, utils: StaticCheckUtils) -> None:
    execute(
        ExecuteOptions(
            goals=(FLATTEN_GOAL,),
            defines=("-Dflatten.mode=resolveCiFriendliesOnly",),
            pom_path=ROOT_POM,
            project_settings_file=options.project_settings_file,
            global_settings_file=options.global_settings_file,
            m2_path=options.m2_path,
        ),
        utils,
    )


def _install_jar_war_artifacts(
    pom_file: str,
    options: EvaluateOptions,
    utils: StaticCheckUtils,
    *,
    use_emoji: bool,
) -> None:
    """Install the archives a module built into its ``target`` directory.

    A ``.jar.original`` (left behind by Spring Boot repackaging) is preferred
    over the repackaged jar because only the original is usable as a
    dependency of sibling modules.
    """

    try:
        final_name = evaluate(options, "project.build.finalName", utils)
    except (MavenEvaluationError, MavenExecutionError) as exc:
        raise MavenInstallError(f"failed to evaluate final name of '{pom_file}': {exc}") from exc
    if not final_name:
        warn(
            f"project.build.finalName of '{pom_file}' is empty, installing only the pom file.",
            use_emoji=use_emoji,
        )
        _install_file(pom_file, pom_file, "", options, utils)
        return

    target = PurePosixPath(pom_file).parent / "target"
    jar_file = str(target / f"{final_name}.jar")
    original_jar_file = str(target / f"{final_name}.jar.original")
    war_file = str(target / f"{final_name}.war")
    classes_jar_file = str(target / f"{final_name}-classes.jar")

    if utils.file_exists(original_jar_file):
        _install_file(original_jar_file, pom_file, "", options, utils)
    elif utils.file_exists(jar_file):
        _install_file(jar_file, pom_file, "", options, utils)
    if utils.file_exists(war_file):
        _install_file(war_file, pom_file, "", options, utils)
    if utils.file_exists(classes_jar_file):
        _install_file(classes_jar_file, pom_file, "classes", options, utils)


def _install_file(
    file: str,
    pom_file: str,
    classifier: str,
    options: EvaluateOptions,
    utils: StaticCheckUtils,
) -> None:
    defines = [f"-Dfile={file}"]
    if classifier:
        defines.append(f"-Dclassifier={classifier}")
    if pom_file:
        defines.append(f"-DpomFile={pom_file}")
    try:
        execute(
            ExecuteOptions(
                goals=(INSTALL_FILE_GOAL,),
                defines=tuple(defines),
                project_settings_file=options.project_settings_file,
                global_settings_file=options.global_settings_file,
                m2_path=options.m2_path,
            ),
            utils,
        )
    except MavenExecutionError as exc:
        raise MavenInstallError(f"failed to install maven artifacts: {exc}") from exc


__all__ = ["install_maven_artifacts", "module_pom_files"]
