# geometry/world.py
from typing import Iterator, List, Optional
from raytracer.core.ray import Ray
from raytracer.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    An insertion-ordered list of Hittable objects, searched linearly for the
    closest hit.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            # A later object has to be strictly closer to replace an earlier hit.
            if rec is not None and (hit_record is None or rec.t < closest_so_far):
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
