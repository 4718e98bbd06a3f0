"""Saving scenes to JSON files and loading them back."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

import numpy as np

from grafengine.camera import Camera
from grafengine.idcounter import IdCounter
from grafengine.playable_object import PlayableObject
from grafengine.scene import Scene
from grafengine.settings import Settings
from grafengine.shapes import ShapeType
from grafengine.transform import Transform
from grafengine.worldobject import WorldObject

DEFAULT_DIRECTORY = "./save_files"
DEFAULT_FILE_NAME = "newSave.json"


# -- vectors and matrices ---------------------------------------------------


def _components(vec: Iterable[float], count: int, name: str) -> list[float]:
    values = [float(v) for v in vec]
    if len(values) != count:
        raise ValueError(f"{name} must have exactly {count} components")
    return values


def vec3_to_dict(vec: Iterable[float]) -> dict[str, float]:
    x, y, z = _components(vec, 3, "vector")
    return {"x": x, "y": y, "z": z}


def vec2_to_dict(vec: Iterable[float]) -> dict[str, float]:
    x, y = _components(vec, 2, "vector")
    return {"x": x, "y": y}


def mat4_to_list(mat: Any) -> list[float]:
    """Flatten a 4x4 matrix column by column into 16 floats."""
    arr = np.asarray(mat, dtype=float)
    if arr.shape != (4, 4):
        raise ValueError("matrix must be 4x4")
    return [float(v) for v in arr.T.flatten()]


def dict_to_vec3(data: Mapping[str, Any]) -> np.ndarray:
    return np.array([float(data["x"]), float(data["y"]), float(data["z"])])


def dict_to_vec2(data: Mapping[str, Any]) -> np.ndarray:
    return np.array([float(data["x"]), float(data["y"])])


def list_to_mat4(data: Sequence[float]) -> np.ndarray:
    """Rebuild a 4x4 matrix from 16 floats stored column by column."""
    values = [float(v) for v in data]
    if len(values) != 16:
        raise ValueError("a 4x4 matrix needs exactly 16 values")
    return np.array(values).reshape(4, 4).T


# -- transforms and cameras -------------------------------------------------


def transform_to_dict(transform: Transform) -> dict[str, Any]:
    return {
        "position": vec3_to_dict(transform.position),
        "euler": vec3_to_dict(transform.euler),
        "scale": vec3_to_dict(transform.scale),
    }


def transform_from_dict(data: Mapping[str, Any]) -> Transform:
    return Transform(
        dict_to_vec3(data["position"]),
        dict_to_vec3(data["euler"]),
        dict_to_vec3(data["scale"]),
    )


def camera_to_dict(camera: Camera) -> dict[str, Any]:
    return {
        "transform": transform_to_dict(camera.transform),
        "fov": float(camera.fov),
        "aspect": float(camera.aspect),
        "near": float(camera.near),
        "far": float(camera.far),
    }


def camera_from_dict(data: Mapping[str, Any]) -> Camera:
    return Camera(
        float(data["fov"]),
        float(data["aspect"]),
        float(data["near"]),
        float(data["far"]),
        transform_from_dict(data["transform"]),
    )


# -- objects ----------------------------------------------------------------


def world_object_to_dict(obj: WorldObject) -> dict[str, Any]:
    return {
        "id": int(obj.id),
        "transform": transform_to_dict(obj.transform),
        "shapeType": obj.shape_type.value,
        "textureName": obj.texture_name,
        "shaderProgramName": obj.shader_program_name,
        "textureRepeat": vec2_to_dict(obj.texture_repeat),
        "fillType": int(obj.fill_type),
    }


def world_object_from_dict(
    data: Mapping[str, Any], counter: IdCounter | None = None
) -> WorldObject:
    """Rebuild a world object, registering its saved id with ``counter``."""
    obj = WorldObject(
        int(data["id"]),
        str(data["textureName"]),
        ShapeType(int(data["shapeType"])),
        str(data["shaderProgramName"]),
        int(data["fillType"]),
        tuple(dict_to_vec2(data["textureRepeat"])),
        counter=counter,
    )
    obj.set_transform(transform_from_dict(data["transform"]))
    return obj


def playable_object_to_dict(playable: PlayableObject) -> dict[str, Any]:
    return {
        "worldObject": world_object_to_dict(playable),
        "camera": camera_to_dict(playable.camera),
        "movementSpeed": float(playable.movement_speed),
        "cameraSpeed": float(playable.camera_speed),
    }


def playable_object_from_dict(
    data: Mapping[str, Any], counter: IdCounter | None = None
) -> PlayableObject:
    template = world_object_from_dict(data["worldObject"], counter)
    playable = PlayableObject(template)
    playable.set_camera(camera_from_dict(data["camera"]))
    playable.movement_speed = float(data["movementSpeed"])
    playable.camera_speed = float(data["cameraSpeed"])
    return playable


# -- scenes -----------------------------------------------------------------


def scene_to_dict(scene: Scene) -> dict[str, Any]:
    if scene.active_playable_object is None:
        raise ValueError("scene has no active playable object")
    if scene.top_camera is None:
        raise ValueError("scene has no top camera")
    if scene.active_object is None:
        raise ValueError("scene has no active object")
    return {
        "activePlayableObject": int(scene.active_playable_object.id),
        "topCamera": int(scene.top_camera.id),
        "playableObjects": [playable_object_to_dict(p) for p in scene.playable_objects],
        "activeObject": int(scene.active_object.id),
        "objects": [world_object_to_dict(o) for o in scene.objects],
    }


def scene_from_dict(
    data: Mapping[str, Any],
    settings: Settings | None = None,
    counter: IdCounter | None = None,
) -> Scene:
    """Rebuild a scene; the counter continues after the largest loaded id."""
    counter = counter if counter is not None else IdCounter()
    counter.reset()
    scene = Scene(settings, counter)
    counter.reset()
    scene.reset()

    active_playable_id = int(data["activePlayableObject"])
    top_camera_id = int(data["topCamera"])
    active_object_id = int(data["activeObject"])
    id_max = -1

    for entry in data["playableObjects"]:
        playable = playable_object_from_dict(entry, counter)
        id_max = max(id_max, playable.id)
        scene.add_playable_object(playable)
        if playable.id == active_playable_id:
            scene.active_playable_object = playable
        if playable.id == top_camera_id:
            scene.top_camera = playable

    for entry in data["objects"]:
        obj = world_object_from_dict(entry, counter)
        id_max = max(id_max, obj.id)
        scene.add_object(obj)
        if obj.id == active_object_id:
            scene.active_object = obj

    counter.set_id(id_max)
    return scene


class SaveStore:
    """A JSON save file holding one scene."""

    def __init__(
        self,
        directory: str | Path = DEFAULT_DIRECTORY,
        file_name: str = DEFAULT_FILE_NAME,
    ) -> None:
        self.directory = Path(directory)
        self.file_name = file_name

    @property
    def path(self) -> Path:
        return self.directory / self.file_name

    def exists(self) -> bool:
        """Whether a save file is present and can be opened."""
        try:
            with self.path.open("r", encoding="utf-8"):
                return True
        except OSError:
            return False

    def save(self, scene: Scene) -> None:
        data = scene_to_dict(scene)
        self.directory.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=4), encoding="utf-8")

    def load(
        self, settings: Settings | None = None, counter: IdCounter | None = None
    ) -> Scene:
        with self.path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        return scene_from_dict(data, settings, counter)