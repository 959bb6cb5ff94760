"""Tests for the discriminator factory and manager."""

import numpy as np
import pytest

from ttreco.errors import InvalidParameterError
from ttreco.post import (
    Chi2Discriminator,
    Chi2DiscriminatorTTAG,
    Context,
    CorrectMatchDiscriminator,
    DiscriminatorManager,
    TopDRMCDiscriminator,
    get_best_hypothesis,
)
from ttreco.post.base import DiscriminatorBase
from ttreco.post.factories import POST_DICT, post_processor_factory


class TestFactory:
    """Test the instantiation of modules from their configuration."""

    @pytest.mark.parametrize(
        "name, cls",
        [
            ("chi2", Chi2Discriminator),
            ("Chi2Discriminator", Chi2Discriminator),
            ("chi2_ttag", Chi2DiscriminatorTTAG),
            ("top_dr_mc", TopDRMCDiscriminator),
            ("best_possible", TopDRMCDiscriminator),
            ("correct_match", CorrectMatchDiscriminator),
        ],
    )
    def test_registered_names(self, name, cls):
        """Test that modules are found by class name, name and alias."""
        assert POST_DICT[name] is cls

    def test_base_classes_not_registered(self):
        """Test that abstract helpers cannot be instantiated from config."""
        assert "Chi2DiscriminatorBase" not in POST_DICT
        assert "DiscriminatorBase" not in POST_DICT

    def test_instantiate(self, ctx, rechyps):
        """Test that the configuration is forwarded to the constructor."""
        cfg = {"rechyps_name": rechyps, "mthad_sigma": 20.0}
        module = post_processor_factory("chi2", cfg, ctx)
        assert isinstance(module, Chi2Discriminator)
        assert module.mthad_sigma == 20.0
        assert "name" not in cfg

    def test_explicit_name(self, ctx, rechyps):
        """Test that a block can be named independently of its class."""
        cfg = {"name": "chi2_ttag", "rechyps_name": rechyps, "discriminator_label": "C"}
        module = post_processor_factory("chi2_boosted", cfg, ctx)
        assert isinstance(module, Chi2DiscriminatorTTAG)
        assert ctx.fields(rechyps) == ("C", "C_tlep", "C_thad")

    def test_unknown_module(self, ctx):
        """Test that an unknown module name is refused."""
        with pytest.raises(ValueError, match="Could not find"):
            post_processor_factory("likelihood", {"rechyps_name": "h"}, ctx)

    def test_invalid_parameter(self, ctx, rechyps):
        """Test that parameter errors propagate out of the factory."""
        with pytest.raises(InvalidParameterError):
            post_processor_factory(
                "chi2", {"rechyps_name": rechyps, "mtlep_sigma": -1.0}, ctx
            )


class TestDiscriminatorManager:
    """Test the discriminator module chain."""

    def test_chain(self, rechyps, ttbargen, matched_hyp):
        """Test that all modules annotate the same event."""
        cfg = {
            "chi2": {"rechyps_name": rechyps},
            "correct_match": {"rechyps_name": rechyps},
            "top_dr_mc": {"rechyps_name": rechyps},
        }
        manager = DiscriminatorManager(cfg)
        assert len(manager) == 3

        event = {rechyps: [matched_hyp], "ttbargen": ttbargen}
        assert manager(event) is True
        assert set(matched_hyp.discriminators) == {
            "Chi2",
            "Chi2_tlep",
            "Chi2_thad",
            "CorrectMatch",
            "TopDRMC",
        }
        assert get_best_hypothesis(event[rechyps], "CorrectMatch") is matched_hyp

    def test_priority(self, rechyps):
        """Test that higher priority modules run first, ties keep their order."""
        cfg = {
            "chi2": {"rechyps_name": rechyps},
            "top_dr_mc": {"rechyps_name": rechyps},
            "correct_match": {"rechyps_name": rechyps, "priority": 2},
        }
        manager = DiscriminatorManager(cfg)
        assert list(manager.modules) == ["correct_match", "chi2", "top_dr_mc"]

    def test_shared_context(self, rechyps):
        """Test that the modules declare their fields on the shared context."""
        ctx = Context()
        DiscriminatorManager({"top_dr_mc": {"rechyps_name": rechyps}}, ctx=ctx)
        assert ctx.fields(rechyps) == ("TopDRMC",)

    def test_stop_on_false(self, rechyps):
        """Test that the chain stops at the first module returning False."""
        calls = []

        class Veto(DiscriminatorBase):
            name = "veto"

            def process(self, event):
                calls.append("veto")
                return False

        manager = DiscriminatorManager({"chi2": {"rechyps_name": rechyps}})
        manager.modules["veto"] = Veto(manager.ctx, rechyps)
        manager.modules.move_to_end("veto", last=False)

        event = {rechyps: []}
        assert manager(event) is False
        assert calls == ["veto"]


class TestContext:
    """Test the field registry."""

    def test_tokens(self):
        """Test that labels are interned to stable tokens."""
        ctx = Context()
        assert ctx.declare("hyps", "Chi2") == 0
        assert ctx.declare("hyps", "Chi2_tlep") == 1
        assert ctx.declare("hyps", "Chi2") == 0
        assert ctx.declare("other", "Chi2") == 0
        assert ctx.check("hyps", "Chi2_tlep") == 1

    def test_undeclared(self):
        """Test that checking an undeclared field is fatal."""
        from ttreco.errors import FatalError, UndeclaredFieldError

        ctx = Context()
        ctx.declare("hyps", "Chi2")
        with pytest.raises(UndeclaredFieldError) as excinfo:
            ctx.check("hyps", "TopDRMC")
        assert excinfo.value.label == "TopDRMC"
        with pytest.raises(FatalError):
            ctx.check("other", "Chi2")
        assert ctx.fields("other") == ()

    def test_set_all_checks_declaration(self, rechyps):
        """Test that the bulk writer also checks the declaration."""
        module = TopDRMCDiscriminator(Context(), rechyps)
        from ttreco.errors import UndeclaredFieldError

        with pytest.raises(UndeclaredFieldError):
            module.set_all([], "Chi2", np.inf)
