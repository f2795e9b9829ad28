import offtrace
import gymnasium
import numpy as onp


# the MDP
env = gymnasium.make('FrozenLakeNonSlippery-v0')
env = offtrace.wrappers.TrainMonitor(env)

# show logs from TrainMonitor
offtrace.enable_logging()


# the target policy mostly moves down and right, which is the way to the goal
probs = onp.tile([0.05, 0.45, 0.45, 0.05], (env.observation_space.n, 1))
pi_targ = offtrace.TabularPolicy(env, probs)

# the behavior policy is uniformly random
pi_behavior = offtrace.RandomPolicy(env, random_seed=7)


# learner
learner = offtrace.OffPolicyEvaluation(
    pi_targ,
    pi_behavior,
    discount=0.9,
    learning_rate=0.05,
    epsilon=0.01,
    trace_discount=offtrace.trace_discounts.ImportanceSampling())


# train
for ep in range(2000):
    s, info = env.reset()

    for t in range(env.spec.max_episode_steps):
        a = pi_behavior(s)
        s_next, r, terminated, truncated, info = env.step(a)

        metrics = learner.update(s, a, s_next, r, done=terminated)
        env.record_metrics(metrics)

        if terminated or truncated:
            learner.clear_traces()
            break

        s = s_next


# state values under the target policy
v = onp.einsum('sa,sa->s', learner.q, pi_targ.probs)
print(onp.round(v.reshape(4, 4), 3))

# persist the learner (including its policies) for later
offtrace.utils.dump(learner, './data/frozen_lake/importance_sampling_evaluation.pkl.lz4')
