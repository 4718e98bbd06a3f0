import json

import numpy as np
import pytest

from grafengine.camera import Camera
from grafengine.idcounter import IdCounter
from grafengine.playable_object import PlayableObject
from grafengine.save import (
    SaveStore,
    camera_from_dict,
    camera_to_dict,
    dict_to_vec2,
    dict_to_vec3,
    list_to_mat4,
    mat4_to_list,
    playable_object_from_dict,
    playable_object_to_dict,
    scene_from_dict,
    scene_to_dict,
    transform_from_dict,
    transform_to_dict,
    vec2_to_dict,
    vec3_to_dict,
    world_object_from_dict,
    world_object_to_dict,
)
from grafengine.scene import Scene
from grafengine.shapes import ShapeType
from grafengine.transform import Transform, translation_matrix
from grafengine.worldobject import WorldObject


def test_vec3_dict_keys_and_round_trip():
    data = vec3_to_dict((1.5, -2.0, 3.25))
    assert data == {"x": 1.5, "y": -2.0, "z": 3.25}
    assert np.allclose(dict_to_vec3(data), (1.5, -2.0, 3.25))


def test_vec2_dict_round_trip():
    data = vec2_to_dict((0.5, 4.0))
    assert data == {"x": 0.5, "y": 4.0}
    assert np.allclose(dict_to_vec2(data), (0.5, 4.0))


def test_vec3_wrong_length_raises():
    with pytest.raises(ValueError):
        vec3_to_dict((1.0, 2.0))


def test_dict_to_vec3_missing_key_raises():
    with pytest.raises(KeyError):
        dict_to_vec3({"x": 1.0, "y": 2.0})


def test_mat4_list_is_column_major():
    values = mat4_to_list(translation_matrix((1.0, 2.0, 3.0)))
    assert len(values) == 16
    assert values[12:15] == [1.0, 2.0, 3.0]


def test_mat4_round_trip():
    matrix = Transform((1.0, -2.0, 0.5), (10.0, 20.0, 30.0), (2.0, 1.0, 3.0)).world_matrix
    assert np.allclose(list_to_mat4(mat4_to_list(matrix)), matrix)


def test_list_to_mat4_wrong_length_raises():
    with pytest.raises(ValueError):
        list_to_mat4([0.0] * 15)


def test_transform_round_trip():
    original = Transform((1.0, 2.0, 3.0), (15.0, 30.0, 45.0), (2.0, 2.0, 0.5))
    restored = transform_from_dict(transform_to_dict(original))
    assert np.allclose(restored.position, original.position)
    assert np.allclose(restored.euler, original.euler)
    assert np.allclose(restored.scale, original.scale)
    assert np.allclose(restored.world_matrix, original.world_matrix)


def test_camera_round_trip():
    camera = Camera(60.0, 1.5, 0.5, 50.0, Transform((0.0, 1.0, -3.0)))
    data = camera_to_dict(camera)
    assert data["fov"] == pytest.approx(60.0)
    restored = camera_from_dict(data)
    assert restored.aspect == pytest.approx(1.5)
    assert restored.near == pytest.approx(0.5)
    assert restored.far == pytest.approx(50.0)
    assert np.allclose(restored.projection_matrix, camera.projection_matrix)
    assert np.allclose(restored.view_matrix, camera.view_matrix)


def test_world_object_round_trip():
    counter = IdCounter()
    obj = WorldObject(-1, "wood", ShapeType.PYRAMID, "LightShader", 1, (2.0, 3.0), counter=counter)
    obj.transform.set_position((4.0, 5.0, 6.0))
    data = world_object_to_dict(obj)
    assert data["shapeType"] == ShapeType.PYRAMID.value

    other = IdCounter()
    restored = world_object_from_dict(data, other)
    assert restored.id == obj.id
    assert restored.texture_name == "wood"
    assert restored.shape_type is ShapeType.PYRAMID
    assert restored.shader_program_name == "LightShader"
    assert restored.fill_type == 1
    assert restored.texture_repeat == (2.0, 3.0)
    assert np.allclose(restored.transform.position, (4.0, 5.0, 6.0))
    assert other.object_by_id(obj.id) is restored


def test_world_object_from_dict_rejects_id_in_use():
    counter = IdCounter()
    obj = WorldObject(-1, counter=counter)
    with pytest.raises(ValueError):
        world_object_from_dict(world_object_to_dict(obj), counter)


def test_playable_object_round_trip():
    counter = IdCounter()
    playable = PlayableObject(WorldObject(-1, "cotton", counter=counter))
    playable.movement_speed = 0.3
    playable.camera_speed = 0.7
    playable.camera.transform.set_position((1.0, 2.0, 3.0))
    data = playable_object_to_dict(playable)

    other = IdCounter()
    restored = playable_object_from_dict(data, other)
    assert restored.id == playable.id
    assert restored.movement_speed == pytest.approx(0.3)
    assert restored.camera_speed == pytest.approx(0.7)
    assert restored.shape_type is ShapeType.FRUSTUM
    assert np.allclose(restored.camera.transform.position, (1.0, 2.0, 3.0))
    assert other.object_by_id(playable.id) is restored


def test_scene_round_trip():
    scene = Scene(counter=IdCounter())
    scene.active_object.transform.set_position((7.0, 8.0, 9.0))
    data = scene_to_dict(scene)

    counter = IdCounter()
    restored = scene_from_dict(data, counter=counter)
    assert [o.id for o in restored.objects] == [o.id for o in scene.objects]
    assert [p.id for p in restored.playable_objects] == [p.id for p in scene.playable_objects]
    assert restored.active_object.id == scene.active_object.id
    assert restored.active_playable_object.id == scene.active_playable_object.id
    assert restored.top_camera.id == scene.top_camera.id
    assert np.allclose(restored.active_object.transform.position, (7.0, 8.0, 9.0))
    all_ids = [o.id for o in scene.objects] + [p.id for p in scene.playable_objects]
    assert counter.current_id == max(all_ids)


def test_scene_from_dict_with_scene_counter():
    counter = IdCounter()
    scene = Scene(counter=counter)
    data = scene_to_dict(scene)
    restored = scene_from_dict(data, counter=counter)
    assert scene_to_dict(restored)["objects"] == data["objects"]


def test_scene_to_dict_without_active_object_raises():
    scene = Scene(counter=IdCounter())
    scene.active_object = None
    with pytest.raises(ValueError):
        scene_to_dict(scene)


def test_save_store_round_trip(tmp_path):
    store = SaveStore(tmp_path / "saves", "newSave.json")
    assert store.path == tmp_path / "saves" / "newSave.json"
    assert not store.exists()

    scene = Scene(counter=IdCounter())
    store.save(scene)
    assert store.exists()
    written = json.loads(store.path.read_text(encoding="utf-8"))
    assert written["activeObject"] == scene.active_object.id

    loaded = store.load(counter=IdCounter())
    assert scene_to_dict(loaded) == scene_to_dict(scene)


def test_save_store_load_missing_file_raises(tmp_path):
    store = SaveStore(tmp_path, "absent.json")
    with pytest.raises(FileNotFoundError):
        store.load()