"""
Wellness ROI - Flask API Server
Owns the current raw-input snapshot and active policy; every mutation
recomputes the full pipeline synchronously inside the same request.
"""
import logging
import os
import threading
import traceback
from flask import Flask, jsonify, request
from engines.inputs import InputError, default_inputs, apply_updates
from engines.policy import PolicyError, load_policy, policy_from_dict
from engines.calculator import compute_with_assumptions

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Guards the snapshot so a recompute never sees a mix of before/after inputs
_LOCK = threading.RLock()

STATE = {
    'inputs': None, 'policy': None,
    'assumptions': None, 'result': None,
    'loaded': False,
}


def _commit(inputs, policy):
    """Recompute for a candidate snapshot, then swap all of STATE in one step."""
    assumptions, result = compute_with_assumptions(inputs, policy)
    STATE.update({'inputs': inputs, 'policy': policy,
                  'assumptions': assumptions, 'result': result})


def _run_all():
    """Fresh session: default inputs, policy from the workbook."""
    _commit(default_inputs(), load_policy())
    STATE['loaded'] = True
    return True


@app.before_request
def _ensure_loaded():
    with _LOCK:
        if not STATE['loaded'] and not STATE.get('_load_error'):
            try:
                _run_all()
                logger.info("Wellness ROI engine loaded")
            except Exception as e:
                err_msg = f"{type(e).__name__}: {e}"
                STATE['_load_error'] = err_msg
                logger.error("Engine load failed: %s\n%s", err_msg, traceback.format_exc())


def _build_data_object():
    return {
        'inputs': STATE['inputs'].to_dict(),
        'policy': STATE['policy'].to_dict(),
        'assumptions': STATE['assumptions'],
        'result': STATE['result'],
    }


def _not_loaded():
    return jsonify({
        'error': 'Engine not loaded',
        'reason': STATE.get('_load_error') or 'Unknown - check server log',
    }), 503


# ══════════════════════════════════════════════════════════════
#  ROUTES
# ══════════════════════════════════════════════════════════════

@app.route('/api/data')
def api_data():
    if not STATE['loaded']: return _not_loaded()
    with _LOCK:
        return jsonify(_build_data_object())

@app.route('/api/result')
def api_result():
    if not STATE['loaded']: return _not_loaded()
    return jsonify(STATE['result'])

@app.route('/api/inputs', methods=['GET'])
def api_get_inputs():
    if not STATE['loaded']: return _not_loaded()
    return jsonify(STATE['inputs'].to_dict())

@app.route('/api/policy', methods=['GET'])
def api_get_policy():
    if not STATE['loaded']: return _not_loaded()
    return jsonify(STATE['policy'].to_dict())


@app.route('/api/inputs', methods=['POST'])
def api_update_inputs():
    """Apply edited raw inputs (clamped at the boundary) and recompute."""
    if not STATE['loaded']: return _not_loaded()
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        return jsonify({'error': 'JSON object of inputs required'}), 400

    with _LOCK:
        try:
            inputs = apply_updates(STATE['inputs'], body)
        except InputError as e:
            return jsonify({'error': str(e)}), 400
        _commit(inputs, STATE['policy'])
        return jsonify({
            'status': 'ok',
            'inputs': STATE['inputs'].to_dict(),
            'result': STATE['result'],
        })


@app.route('/api/policy', methods=['POST'])
def api_replace_policy():
    """Swap the policy wholesale (scenario testing). Omitted constants use defaults."""
    if not STATE['loaded']: return _not_loaded()
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        return jsonify({'error': 'JSON object of policy constants required'}), 400

    with _LOCK:
        try:
            policy = policy_from_dict(body)
        except PolicyError as e:
            return jsonify({'error': str(e)}), 400
        _commit(STATE['inputs'], policy)
        return jsonify({
            'status': 'ok',
            'policy': STATE['policy'].to_dict(),
            'result': STATE['result'],
        })


@app.route('/api/refresh', methods=['POST'])
def api_refresh():
    """Reset inputs to defaults and reload the policy workbook."""
    with _LOCK:
        try:
            STATE['loaded'] = False
            STATE['_load_error'] = None
            _run_all()
            return jsonify({'status': 'ok', 'message': 'Inputs reset and policy reloaded',
                            'data': _build_data_object()})
        except Exception as e:
            logger.exception("Refresh failed")
            STATE['_load_error'] = f"{type(e).__name__}: {e}"
            return jsonify({'status': 'error', 'message': str(e)}), 500


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    app.run(debug=False, host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
