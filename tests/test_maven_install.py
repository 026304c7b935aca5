# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for installing project artifacts into the local repository."""

from __future__ import annotations

import pytest

from mvnqa.errors import MavenInstallError
from mvnqa.maven import EvaluateOptions, install_maven_artifacts
from mvnqa.maven.install import FLATTEN_GOAL, INSTALL_FILE_GOAL, module_pom_files


def _per_pom(values: dict[str, str]):
    def lookup(params: tuple[str, ...]) -> str:
        return values[params[params.index("--file") + 1]]

    return lookup


def _installed(fake_utils) -> list[tuple[str, ...]]:
    return [
        tuple(param for param in call if param.startswith(("-Dfile=", "-DpomFile=", "-Dclassifier=")))
        for call in fake_utils.calls
        if INSTALL_FILE_GOAL in call
    ]


@pytest.fixture
def project(fake_utils, recorded_warnings):
    fake_utils.files.add("pom.xml")
    fake_utils.glob_results["**/pom.xml"] = ["core/pom.xml", "pom.xml", "web/pom.xml"]
    fake_utils.outputs["-Dexpression=project.packaging"] = _per_pom(
        {"pom.xml": "pom", "core/pom.xml": "jar", "web/pom.xml": "war"}
    )
    fake_utils.outputs["-Dexpression=project.build.finalName"] = _per_pom(
        {"core/pom.xml": "core-1.0", "web/pom.xml": "web-1.0"}
    )
    return fake_utils


def test_missing_root_pom_is_an_install_failure(fake_utils) -> None:
    with pytest.raises(MavenInstallError):
        install_maven_artifacts(fake_utils, EvaluateOptions())

    assert fake_utils.calls == []


def test_root_pom_is_flattened_first(project) -> None:
    install_maven_artifacts(project, EvaluateOptions(m2_path=".m2"), use_emoji=False)

    first = project.calls[0]
    assert first[-1] == FLATTEN_GOAL
    assert "-Dflatten.mode=resolveCiFriendliesOnly" in first
    assert "-Dmaven.repo.local=.m2" in first


def test_modules_install_pom_jar_war_and_classes(project) -> None:
    project.files.update(
        {
            "core/target/core-1.0.jar",
            "web/target/web-1.0.war",
            "web/target/web-1.0-classes.jar",
        }
    )

    install_maven_artifacts(project, EvaluateOptions(), use_emoji=False)

    assert _installed(project) == [
        ("-Dfile=core/target/core-1.0.jar", "-DpomFile=core/pom.xml"),
        ("-Dfile=pom.xml", "-DpomFile=pom.xml"),
        ("-Dfile=web/target/web-1.0.war", "-DpomFile=web/pom.xml"),
        ("-Dfile=web/target/web-1.0-classes.jar", "-Dclassifier=classes", "-DpomFile=web/pom.xml"),
    ]


def test_original_jar_is_preferred_over_repackaged_jar(project) -> None:
    project.files.update({"core/target/core-1.0.jar", "core/target/core-1.0.jar.original"})

    install_maven_artifacts(project, EvaluateOptions(), use_emoji=False)

    installed = _installed(project)
    assert ("-Dfile=core/target/core-1.0.jar.original", "-DpomFile=core/pom.xml") in installed
    assert ("-Dfile=core/target/core-1.0.jar", "-DpomFile=core/pom.xml") not in installed


def test_empty_final_name_installs_only_pom(project, recorded_warnings: list[str]) -> None:
    project.outputs["-Dexpression=project.build.finalName"] = _per_pom({"core/pom.xml": "", "web/pom.xml": ""})

    install_maven_artifacts(project, EvaluateOptions(), use_emoji=False)

    assert ("-Dfile=core/pom.xml", "-DpomFile=core/pom.xml") in _installed(project)
    assert any("finalName" in message for message in recorded_warnings)


def test_install_failure_is_wrapped(project) -> None:
    project.failing.add("-Dfile=pom.xml")

    with pytest.raises(MavenInstallError) as excinfo:
        install_maven_artifacts(project, EvaluateOptions(), use_emoji=False)

    assert "failed to install maven artifacts" in str(excinfo.value)


def test_vendor_and_build_directories_are_skipped(fake_utils) -> None:
    fake_utils.glob_results["**/pom.xml"] = [
        "pom.xml",
        "app/node_modules/lib/pom.xml",
        "core/target/classes/pom.xml",
        "core/pom.xml",
    ]

    assert module_pom_files(fake_utils) == ["pom.xml", "core/pom.xml"]
