r"""Contain the route table and the wire models of the ATC API.

The operation names defined here are the keys of ``ROUTES``, the route
table used by default by ``ATCClient``.
"""

from __future__ import annotations

__all__ = [
    "ABORT_BUILD",
    "BUILD_EVENTS",
    "CONFIG_VERSION_HEADER",
    "CREATE_BUILD",
    "CREATE_JOB_BUILD",
    "DELETE_PIPELINE",
    "GET_BUILD",
    "GET_CONFIG",
    "GET_CONTAINER",
    "GET_JOB",
    "GET_PIPELINE",
    "GET_RESOURCE",
    "HIJACK_CONTAINER",
    "LIST_AUTH_METHODS",
    "LIST_BUILDS",
    "LIST_CONTAINERS",
    "LIST_JOBS",
    "LIST_JOB_BUILDS",
    "LIST_PIPELINES",
    "LIST_RESOURCES",
    "LIST_WORKERS",
    "PAUSE_PIPELINE",
    "PAUSE_RESOURCE",
    "ROUTES",
    "SAVE_CONFIG",
    "UNPAUSE_PIPELINE",
    "UNPAUSE_RESOURCE",
    "Build",
    "Container",
    "Pipeline",
]

from pydantic import BaseModel, ConfigDict

from atcclient.core.config import CONFIG_VERSION_HEADER
from atcclient.routes import Route, RouteTable

SAVE_CONFIG = "SaveConfig"
GET_CONFIG = "GetConfig"

GET_BUILD = "GetBuild"
LIST_BUILDS = "ListBuilds"
CREATE_BUILD = "CreateBuild"
BUILD_EVENTS = "BuildEvents"
ABORT_BUILD = "AbortBuild"

GET_JOB = "GetJob"
LIST_JOBS = "ListJobs"
LIST_JOB_BUILDS = "ListJobBuilds"
CREATE_JOB_BUILD = "CreateJobBuild"

LIST_PIPELINES = "ListPipelines"
GET_PIPELINE = "GetPipeline"
DELETE_PIPELINE = "DeletePipeline"
PAUSE_PIPELINE = "PausePipeline"
UNPAUSE_PIPELINE = "UnpausePipeline"

LIST_RESOURCES = "ListResources"
GET_RESOURCE = "GetResource"
PAUSE_RESOURCE = "PauseResource"
UNPAUSE_RESOURCE = "UnpauseResource"

LIST_CONTAINERS = "ListContainers"
GET_CONTAINER = "GetContainer"
HIJACK_CONTAINER = "HijackContainer"

LIST_WORKERS = "ListWorkers"
LIST_AUTH_METHODS = "ListAuthMethods"

_PIPELINE = "/api/v1/pipelines/{pipeline_name}"

ROUTES = RouteTable(
    [
        Route(SAVE_CONFIG, "PUT", f"{_PIPELINE}/config"),
        Route(GET_CONFIG, "GET", f"{_PIPELINE}/config"),
        Route(GET_BUILD, "GET", "/api/v1/builds/{build_id}"),
        Route(LIST_BUILDS, "GET", "/api/v1/builds"),
        Route(CREATE_BUILD, "POST", "/api/v1/builds"),
        Route(BUILD_EVENTS, "GET", "/api/v1/builds/{build_id}/events"),
        Route(ABORT_BUILD, "POST", "/api/v1/builds/{build_id}/abort"),
        Route(GET_JOB, "GET", f"{_PIPELINE}/jobs/{{job_name}}"),
        Route(LIST_JOBS, "GET", f"{_PIPELINE}/jobs"),
        Route(LIST_JOB_BUILDS, "GET", f"{_PIPELINE}/jobs/{{job_name}}/builds"),
        Route(CREATE_JOB_BUILD, "POST", f"{_PIPELINE}/jobs/{{job_name}}/builds"),
        Route(LIST_PIPELINES, "GET", "/api/v1/pipelines"),
        Route(GET_PIPELINE, "GET", _PIPELINE),
        Route(DELETE_PIPELINE, "DELETE", _PIPELINE),
        Route(PAUSE_PIPELINE, "PUT", f"{_PIPELINE}/pause"),
        Route(UNPAUSE_PIPELINE, "PUT", f"{_PIPELINE}/unpause"),
        Route(LIST_RESOURCES, "GET", f"{_PIPELINE}/resources"),
        Route(GET_RESOURCE, "GET", f"{_PIPELINE}/resources/{{resource_name}}"),
        Route(PAUSE_RESOURCE, "PUT", f"{_PIPELINE}/resources/{{resource_name}}/pause"),
        Route(UNPAUSE_RESOURCE, "PUT", f"{_PIPELINE}/resources/{{resource_name}}/unpause"),
        Route(LIST_CONTAINERS, "GET", "/api/v1/containers"),
        Route(GET_CONTAINER, "GET", "/api/v1/containers/{id}"),
        Route(HIJACK_CONTAINER, "POST", "/api/v1/containers/{id}/hijack"),
        Route(LIST_WORKERS, "GET", "/api/v1/workers"),
        Route(LIST_AUTH_METHODS, "GET", "/api/v1/auth/methods"),
    ]
)


class Build(BaseModel):
    r"""A build, as returned by the builds endpoints."""

    model_config = ConfigDict(extra="ignore")

    id: int = 0
    name: str = ""
    status: str = ""
    job_name: str = ""
    pipeline_name: str = ""
    url: str = ""
    api_url: str = ""


class Container(BaseModel):
    r"""A container running on a worker."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    pipeline_name: str = ""
    type: str = ""
    name: str = ""
    build_id: int = 0
    worker_name: str = ""


class Pipeline(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    url: str = ""
    paused: bool = False
