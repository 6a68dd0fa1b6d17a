"""Tests for ownership helpers."""

from __future__ import annotations

from child_reconciler.models import ChildResource, Owner, OwnerReference
from child_reconciler.ownership import (
    controller_of,
    is_controlled_by,
    make_controller_reference,
    new_child,
)


def child_with(*refs: OwnerReference) -> ChildResource:
    return ChildResource(
        api_version="networking.istio.io/v1alpha3",
        kind="VirtualService",
        namespace="default",
        name="vs",
        owner_references=list(refs),
    )


class TestControllerOf:
    """Test cases for controller_of function."""

    def test_no_references(self):
        """Test that a child without references has no controller."""
        assert controller_of(child_with()) is None

    def test_only_non_controller_references(self):
        """Test that plain owner references are not controllers."""
        ref = OwnerReference(api_version="v1", kind="Service", name="a", uid="1")
        assert controller_of(child_with(ref)) is None

    def test_returns_controller(self):
        """Test that the controller reference is found among others."""
        plain = OwnerReference(api_version="v1", kind="ConfigMap", name="cm", uid="0")
        ctrl = OwnerReference(api_version="v1", kind="Service", name="a", uid="1", controller=True)
        assert controller_of(child_with(plain, ctrl)) == ctrl


class TestIsControlledBy:
    """Test cases for is_controlled_by function."""

    def test_matching_controller(self, owner, owner_ref):
        """Test that a matching controller reference means ownership."""
        assert is_controlled_by(child_with(owner_ref), owner)

    def test_uid_mismatch(self, owner):
        """Test that a different uid is not ownership."""
        ref = OwnerReference(api_version="v1", kind="Service", name="ownerObj", uid="other", controller=True)
        assert not is_controlled_by(child_with(ref), owner)

    def test_kind_mismatch(self, owner):
        """Test that a different kind is not ownership."""
        ref = OwnerReference(api_version="v1", kind="Ingress", name="ownerObj", uid="abcd", controller=True)
        assert not is_controlled_by(child_with(ref), owner)

    def test_name_mismatch(self, owner):
        """Test that a different name is not ownership."""
        ref = OwnerReference(api_version="v1", kind="Service", name="other", uid="abcd", controller=True)
        assert not is_controlled_by(child_with(ref), owner)

    def test_not_controller(self, owner):
        """Test that a matching non-controller reference is not ownership."""
        ref = OwnerReference(api_version="v1", kind="Service", name="ownerObj", uid="abcd")
        assert not is_controlled_by(child_with(ref), owner)


class TestNewChild:
    """Test cases for building desired children."""

    def test_make_controller_reference(self, owner):
        """Test the controller reference fields."""
        ref = make_controller_reference(owner)
        assert ref.kind == "Service"
        assert ref.name == "ownerObj"
        assert ref.uid == "abcd"
        assert ref.controller is True
        assert ref.block_owner_deletion is True

    def test_new_child_is_controlled_by_owner(self, owner):
        """Test that a built child is owned and lives in the owner's namespace."""
        child = new_child(
            owner,
            "networking.istio.io/v1alpha3",
            "VirtualService",
            "vs",
            {"hosts": ["desired.example.com"]},
            labels={"app": "web"},
        )

        assert child.namespace == "default"
        assert child.metadata == {"labels": {"app": "web"}}
        assert is_controlled_by(child, owner)
        assert len(child.owner_references) == 1

    def test_new_child_copies_spec(self, owner):
        """Test that the caller's spec dict is not shared."""
        spec = {"hosts": ["a"]}
        child = new_child(owner, "v1", "VirtualService", "vs", spec)
        spec["hosts"].append("b")
        assert child.spec == {"hosts": ["a"]}


def test_owner_from_body():
    """Test building an owner from a kopf body."""
    body = {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": {"name": "ownerObj", "namespace": "default", "uid": "abcd", "generation": 3},
        "spec": {},
    }
    owner = Owner.from_body(body)
    assert owner == Owner(api_version="v1", kind="Service", namespace="default", name="ownerObj", uid="abcd")
    assert owner.to_body()["metadata"] == {"name": "ownerObj", "namespace": "default", "uid": "abcd"}
