import random
from datetime import datetime, timedelta

users = ["alice", "carol", "dave"]

with open("sample_auth.log", "w") as f:
    base_time = datetime(2021, 6, 10, 3, 0, 0)
    # Normal traffic
    for i in range(120):
        t = base_time + timedelta(seconds=i*30)
        ip = random.choice(["192.168.1.1", "10.0.0.10"])
        f.write(f"{t.strftime('%b %d %H:%M:%S')} server sshd[1234]: Accepted password for {random.choice(users)} from {ip} port 22\n")

    # Rapid logins for one user → should trigger frequency alerts
    attack_time = base_time + timedelta(minutes=5, seconds=5)
    for i in range(6):
        t = attack_time + timedelta(seconds=i*4)
        f.write(f"{t.strftime('%b %d %H:%M:%S')} server sshd[1234]: Accepted password for bob from 172.16.0.7 port 22\n")

    # Login from a banned address (add 10.66.6.6 to banned_ips.txt)
    t = base_time + timedelta(minutes=7)
    f.write(f"{t.strftime('%b %d %H:%M:%S')} server sshd[1234]: Accepted password for root from 10.66.6.6 port 22\n")
