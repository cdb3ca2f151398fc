from shipnote.infra.actions.outputs import ActionOutputs, report_failure

__all__ = ["ActionOutputs", "report_failure"]
